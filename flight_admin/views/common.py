"""Common response schemas."""

from typing import Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    detail: Union[str, list[str]]


class SuccessResponse(BaseModel):
    success: bool = True
    message: str

"""Utility helpers for the flight admin backend."""

from .security import derive_passport, hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "derive_passport",
]

"""User persistence operations shared by the user controllers."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from flight_admin.models.user import User, UserRole
from flight_admin.services.errors import (
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
)
from flight_admin.telemetry import record_mutation
from flight_admin.utils import derive_passport, hash_password, verify_password
from flight_admin.views.users import UserCreateRequest, UserUpdateRequest

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "El email ya está registrado."


def parse_identifier(raw_id: str, message: str = "ID de usuario inválido.") -> str:
    """Return the canonical form of a record id or raise for malformed input."""

    try:
        return str(UUID(raw_id))
    except (TypeError, ValueError):
        raise InvalidIdentifierError(message) from None


class UserRepository:
    """Read/write access to the ``users`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get(self, raw_id: str) -> User:
        user_id = parse_identifier(raw_id)
        result = await self.session.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError("Usuario no encontrado.")
        return user

    async def list_all(self) -> list[User]:
        result = await self.session.execute(select(User).order_by(User.created_at))
        return list(result.scalars().all())

    async def search(
        self,
        nombre: Optional[str] = None,
        apellido: Optional[str] = None,
        email: Optional[str] = None,
        rol: Optional[UserRole] = None,
    ) -> list[User]:
        """Filter users; text filters are case-insensitive substrings, AND-ed."""

        query = select(User)
        if nombre:
            query = query.where(User.first_name.icontains(nombre, autoescape=True))
        if apellido:
            query = query.where(User.last_name.icontains(apellido, autoescape=True))
        if email:
            query = query.where(User.email.icontains(email, autoescape=True))
        if rol is not None:
            query = query.where(User.role == rol)

        result = await self.session.execute(query.order_by(User.created_at))
        return list(result.scalars().all())

    async def list_by_role(self, rol: UserRole) -> list[User]:
        return await self.search(rol=rol)

    async def create(self, payload: UserCreateRequest) -> User:
        if await self.get_by_email(payload.email):
            raise ConflictError(EMAIL_TAKEN)

        user = User(
            first_name=payload.nombre,
            last_name=payload.apellido,
            email=payload.email,
            password_hash=hash_password(payload.password),
            phone=payload.telefono,
            address=payload.direccion,
            passport=derive_passport(payload.nombre, payload.apellido),
            role=payload.rol,
        )
        self.session.add(user)
        await self._commit()
        await self.session.refresh(user)

        logger.info("Created user %s with role %s", user.id, user.role.value)
        record_mutation("user", "create")
        return user

    async def update(self, raw_id: str, payload: UserUpdateRequest) -> User:
        user = await self.get(raw_id)
        changes = payload.to_changes()

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            holder = await self.get_by_email(new_email)
            if holder is not None and holder.id != user.id:
                raise ConflictError("El nuevo email ya está registrado por otro usuario.")

        for column, value in changes.items():
            setattr(user, column, value)

        if payload.password and not verify_password(payload.password, user.password_hash):
            user.password_hash = hash_password(payload.password)

        await self._commit()
        await self.session.refresh(user)

        logger.info("Updated user %s (fields: %s)", user.id, sorted(changes))
        record_mutation("user", "update")
        return user

    async def delete(self, raw_id: str) -> str:
        """Delete a user and return its email for confirmation messaging."""

        user = await self.get(raw_id)
        email = user.email
        await self.session.delete(user)
        await self.session.commit()

        logger.info("Deleted user %s", user.id)
        record_mutation("user", "delete")
        return email

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning("Unique constraint violated while saving a user")
            raise ConflictError(EMAIL_TAKEN) from None

"""Concrete SessionRepository keeping the current user and token under two keys."""

import json
import logging
from typing import Any

from legal_platform.application.interfaces import KeyValueStore, SessionRepository
from legal_platform.domain.entities import User, UserRole
from legal_platform.domain.exceptions import InvalidUpdateError
from legal_platform.infrastructure.repositories.record_codec import (
    encode_changes,
    parse_datetime,
    required,
    to_record,
)

logger = logging.getLogger(__name__)


class KeyValueSessionRepository(SessionRepository):
    """Implements the SessionRepository port on a KeyValueStore.

    The user is stored as a JSON object under ``<prefix>_user`` and the token
    as a plain string under ``<prefix>_token``. An unreadable user record is
    treated as "no session" rather than an error.
    """

    def __init__(self, store: KeyValueStore, prefix: str):
        self._store = store
        self._user_key = f"{prefix}_user"
        self._token_key = f"{prefix}_token"

    def _to_entity(self, record: dict[str, Any]) -> User:
        return User(
            id=required(record, "id"),
            name=required(record, "name"),
            email=required(record, "email"),
            role=UserRole(required(record, "role")),
            photo=record.get("photo"),
            phone=record.get("phone"),
            address=record.get("address"),
            specialty=record.get("specialty"),
            experience=record.get("experience"),
            rating=record.get("rating"),
            fees=record.get("fees"),
            bio=record.get("bio"),
            created_at=parse_datetime(required(record, "createdAt")),
        )

    async def _read_user_record(self) -> dict[str, Any] | None:
        raw = await self._store.get_item(self._user_key)
        if raw is None:
            return None
        try:
            record = json.loads(raw)
            self._to_entity(record)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable session user under %s: %r", self._user_key, exc)
            return None
        return record

    async def load_user(self) -> User | None:
        record = await self._read_user_record()
        return self._to_entity(record) if record is not None else None

    async def load_token(self) -> str | None:
        return await self._store.get_item(self._token_key)

    async def save(self, user: User, token: str) -> None:
        await self._store.set_item(self._user_key, json.dumps(to_record(user)))
        await self._store.set_item(self._token_key, token)

    async def update_user(self, changes: dict[str, Any]) -> User | None:
        async with self._store.lock_for(self._user_key):
            record = await self._read_user_record()
            if record is None:
                return None
            merged = {**record, **encode_changes(changes)}
            try:
                user = self._to_entity(merged)
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidUpdateError("User", record["id"], repr(exc)) from exc
            await self._store.set_item(self._user_key, json.dumps(merged))
        return user

    async def clear(self) -> None:
        await self._store.remove_item(self._user_key)
        await self._store.remove_item(self._token_key)

"""
Adapter: Profile repository.

Implements ProfileRepository port.
Persists configuration profiles through a SQLAlchemy engine.
"""

import json
import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from mdm_management.domain.management.entities import Profile
from mdm_management.domain.management.errors import ProfileExistsError
from mdm_management.domain.management.ports import ProfileRepository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = """
    SELECT uuid, payload_identifier, payload_display_name,
           payload_description, payload_organization, payload_version,
           payload_content, created_at
    FROM profiles
"""


class SQLProfileRepository(ProfileRepository):
    """Stores profiles in a relational database.

    Implements the ProfileRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the profiles table if it does not exist."""
        with self._engine.begin() as conn:
            conn.execute(
                text(
                    """
                    CREATE TABLE IF NOT EXISTS profiles (
                        uuid                 VARCHAR(36) PRIMARY KEY,
                        payload_identifier   VARCHAR(255) NOT NULL UNIQUE,
                        payload_display_name VARCHAR(255) NOT NULL DEFAULT '',
                        payload_description  TEXT NOT NULL DEFAULT '',
                        payload_organization VARCHAR(255) NOT NULL DEFAULT '',
                        payload_version      INTEGER NOT NULL DEFAULT 1,
                        payload_content      TEXT NOT NULL DEFAULT '[]',
                        created_at           VARCHAR(32)
                    )
                    """
                )
            )

    def get(self, uuid: str) -> Optional[Profile]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(_SELECT_COLUMNS + " WHERE uuid = :uuid"), {"uuid": uuid}
            ).mappings().first()
        return _row_to_profile(row) if row is not None else None

    def get_by_identifier(self, payload_identifier: str) -> Optional[Profile]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(_SELECT_COLUMNS + " WHERE payload_identifier = :identifier"),
                {"identifier": payload_identifier},
            ).mappings().first()
        return _row_to_profile(row) if row is not None else None

    def list_all(self) -> list[Profile]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(_SELECT_COLUMNS + " ORDER BY created_at, payload_identifier")
            ).mappings().all()
        return [_row_to_profile(row) for row in rows]

    def save(self, profile: Profile) -> None:
        """Insert a profile.

        Raises:
            ProfileExistsError: If the uuid or payload identifier is taken.
        """
        query = text(
            """
            INSERT INTO profiles
                (uuid, payload_identifier, payload_display_name,
                 payload_description, payload_organization, payload_version,
                 payload_content, created_at)
            VALUES
                (:uuid, :identifier, :display_name, :description,
                 :organization, :version, :content, :created_at)
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    query,
                    {
                        "uuid": profile.uuid,
                        "identifier": profile.payload_identifier,
                        "display_name": profile.payload_display_name,
                        "description": profile.payload_description,
                        "organization": profile.payload_organization,
                        "version": profile.payload_version,
                        "content": json.dumps(profile.payload_content),
                        "created_at": (
                            profile.created_at.isoformat()
                            if profile.created_at
                            else None
                        ),
                    },
                )
        except IntegrityError as exc:
            raise ProfileExistsError(profile.payload_identifier) from exc

        logger.debug("Saved profile uuid=%s.", profile.uuid)

    def delete(self, uuid: str) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(
                text("DELETE FROM profiles WHERE uuid = :uuid"), {"uuid": uuid}
            )
            deleted = result.rowcount
        return deleted > 0


def _row_to_profile(row: RowMapping) -> Profile:
    content: Any = json.loads(row["payload_content"] or "[]")
    created_at = row["created_at"]
    return Profile(
        uuid=row["uuid"],
        payload_identifier=row["payload_identifier"],
        payload_display_name=row["payload_display_name"],
        payload_description=row["payload_description"],
        payload_organization=row["payload_organization"],
        payload_version=int(row["payload_version"]),
        payload_content=content,
        created_at=datetime.fromisoformat(created_at) if created_at else None,
    )

"""
Composition root for the management bounded context.

Wires infrastructure adapters into the default management service.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from mdm_management.application.management.service import DefaultManagementService
from mdm_management.core.config import Settings
from mdm_management.infrastructure.management.dep_client import DEPClientAdapter
from mdm_management.infrastructure.management.profile_repository import (
    SQLProfileRepository,
)

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the profile store.

    In-memory SQLite shares one connection across threads so the schema
    is visible to requests served from the threadpool.
    """
    if database_url in IN_MEMORY_SQLITE_URLS:
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url, connect_args={"check_same_thread": False}
        )
    return create_engine(database_url, pool_pre_ping=True)


def build_management_service(settings: Settings) -> DefaultManagementService:
    """Build DefaultManagementService with its infrastructure dependencies."""
    profile_repo = SQLProfileRepository(engine=build_engine(settings.database_url))
    profile_repo.create_schema()
    return DefaultManagementService(
        profile_repo=profile_repo,
        dep_source=DEPClientAdapter(
            base_url=settings.dep_server_url,
            session_token=settings.dep_session_token,
            limit=settings.dep_fetch_limit,
            timeout=settings.dep_timeout_seconds,
            max_pages=settings.dep_max_pages,
        ),
    )

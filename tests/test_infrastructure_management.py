"""
Tests for the management infrastructure adapters.

SQLProfileRepository runs against in-memory SQLite.
DEPClientAdapter runs against an httpx.MockTransport; no network calls.
"""

import json
from datetime import datetime, timezone

import httpx
import pytest

from mdm_management.domain.management.entities import Profile
from mdm_management.domain.management.errors import DEPFetchError, ProfileExistsError
from mdm_management.infrastructure.management.dep_client import (
    SESSION_HEADER,
    DEPClientAdapter,
)
from mdm_management.infrastructure.management.profile_repository import (
    SQLProfileRepository,
)
from mdm_management.interfaces.management.dependencies import build_engine

UUID_A = "6f1a7d2e-3b4c-4d5e-8f90-112233445566"
UUID_B = "0b8e4c1a-9d2f-4e6b-a7c3-665544332211"


def _profile(uuid: str, identifier: str, day: int = 1) -> Profile:
    return Profile(
        uuid=uuid,
        payload_identifier=identifier,
        payload_display_name=identifier.upper(),
        payload_version=3,
        payload_content=[{"PayloadType": "com.apple.wifi.managed", "SSID_STR": "corp"}],
        created_at=datetime(2024, 1, day, tzinfo=timezone.utc),
    )


@pytest.fixture
def repo() -> SQLProfileRepository:
    repository = SQLProfileRepository(engine=build_engine("sqlite://"))
    repository.create_schema()
    return repository


class TestSQLProfileRepository:
    """Tests for the SQL profile store."""

    def test_save_and_get(self, repo: SQLProfileRepository) -> None:
        profile = _profile(UUID_A, "com.example.wifi")
        repo.save(profile)
        assert repo.get(UUID_A) == profile
        assert repo.get_by_identifier("com.example.wifi") == profile

    def test_missing(self, repo: SQLProfileRepository) -> None:
        assert repo.get(UUID_A) is None
        assert repo.get_by_identifier("nope") is None

    def test_list_ordered_by_creation(self, repo: SQLProfileRepository) -> None:
        repo.save(_profile(UUID_B, "com.example.b", day=2))
        repo.save(_profile(UUID_A, "com.example.a", day=1))
        assert [p.uuid for p in repo.list_all()] == [UUID_A, UUID_B]

    def test_duplicate_identifier(self, repo: SQLProfileRepository) -> None:
        repo.save(_profile(UUID_A, "com.example.wifi"))
        with pytest.raises(ProfileExistsError):
            repo.save(_profile(UUID_B, "com.example.wifi"))

    def test_delete(self, repo: SQLProfileRepository) -> None:
        repo.save(_profile(UUID_A, "com.example.wifi"))
        assert repo.delete(UUID_A) is True
        assert repo.delete(UUID_A) is False
        assert repo.list_all() == []

    def test_create_schema_is_idempotent(self, repo: SQLProfileRepository) -> None:
        repo.create_schema()
        assert repo.list_all() == []


def _client(handler, max_pages: int = 10) -> DEPClientAdapter:
    return DEPClientAdapter(
        base_url="https://dep.example.test/",
        session_token="session-token",
        limit=2,
        max_pages=max_pages,
        transport=httpx.MockTransport(handler),
    )


class TestDEPClientAdapter:
    """Tests for the DEP device fetch adapter."""

    def test_follows_cursor(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            calls.append(payload)
            assert request.url.path == "/server/devices"
            assert request.headers[SESSION_HEADER] == "session-token"
            if "cursor" not in payload:
                return httpx.Response(
                    200,
                    json={
                        "devices": [
                            {"serial_number": "C02A", "model": "MacBook Pro"},
                            {
                                "serial_number": "C02B",
                                "device_assigned_date": "2024-03-01T10:00:00Z",
                            },
                        ],
                        "cursor": "page-2",
                        "more_to_follow": True,
                    },
                )
            return httpx.Response(
                200,
                json={
                    "devices": [{"serial_number": "C02C"}],
                    "cursor": "page-3",
                    "more_to_follow": False,
                },
            )

        devices = _client(handler).fetch_devices()

        assert [d.serial_number for d in devices] == ["C02A", "C02B", "C02C"]
        assert devices[0].model == "MacBook Pro"
        assert devices[1].device_assigned_date == datetime(
            2024, 3, 1, 10, 0, tzinfo=timezone.utc
        )
        assert calls == [{"limit": 2}, {"limit": 2, "cursor": "page-2"}]

    def test_no_devices(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"more_to_follow": False})

        assert _client(handler).fetch_devices() == []

    def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text="unauthorized")

        with pytest.raises(DEPFetchError, match="status 401"):
            _client(handler).fetch_devices()

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(DEPFetchError):
            _client(handler).fetch_devices()

    def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(DEPFetchError):
            _client(handler).fetch_devices()

    def test_not_configured(self) -> None:
        with pytest.raises(DEPFetchError, match="not configured"):
            DEPClientAdapter(base_url=None).fetch_devices()

    def test_repeated_cursor_stops_paging(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={"devices": [], "cursor": "same", "more_to_follow": True},
            )

        with pytest.raises(DEPFetchError, match="did not advance"):
            _client(handler).fetch_devices()
        assert len(calls) == 2

    def test_page_limit(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(
                200,
                json={
                    "devices": [{"serial_number": f"C02{len(calls)}"}],
                    "cursor": f"page-{len(calls) + 1}",
                    "more_to_follow": True,
                },
            )

        with pytest.raises(DEPFetchError, match="more than 3 pages"):
            _client(handler, max_pages=3).fetch_devices()
        assert len(calls) == 3

    def test_last_allowed_page_ends_fetch(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            cursor = json.loads(request.content).get("cursor")
            if cursor is None:
                return httpx.Response(
                    200,
                    json={
                        "devices": [{"serial_number": "C02A"}],
                        "cursor": "page-2",
                        "more_to_follow": True,
                    },
                )
            return httpx.Response(
                200, json={"devices": [{"serial_number": "C02B"}], "more_to_follow": False}
            )

        devices = _client(handler, max_pages=2).fetch_devices()
        assert [d.serial_number for d in devices] == ["C02A", "C02B"]

    @pytest.mark.parametrize(
        "record",
        [
            {"serial_number": "C02A", "profile_assign_time": "yesterday"},
            {"serial_number": "C02A", "device_assigned_date": 20240301},
            "C02A",
        ],
    )
    def test_malformed_device_record(self, record: object) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"devices": [record], "more_to_follow": False}
            )

        with pytest.raises(DEPFetchError, match="malformed device record"):
            _client(handler).fetch_devices()

    def test_non_object_page(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"serial_number": "C02A"}])

        with pytest.raises(DEPFetchError, match="unexpected response shape"):
            _client(handler).fetch_devices()

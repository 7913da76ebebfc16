"""
Adapter: DEP device source.

Implements DEPDeviceSource port against the device enrollment program
API. Devices are fetched page by page from POST /server/devices,
following the returned cursor until more_to_follow is false.
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from mdm_management.domain.management.entities import DEPDevice
from mdm_management.domain.management.errors import DEPFetchError
from mdm_management.domain.management.ports import DEPDeviceSource

logger = logging.getLogger(__name__)

DEVICES_PATH = "/server/devices"
SESSION_HEADER = "X-ADM-Auth-Session"
DEFAULT_MAX_PAGES = 1000


class DEPClientAdapter(DEPDeviceSource):
    """Fetches device records from a DEP server over HTTP."""

    def __init__(
        self,
        base_url: Optional[str],
        session_token: Optional[str] = None,
        limit: int = 100,
        timeout: float = 30.0,
        max_pages: int = DEFAULT_MAX_PAGES,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            base_url: DEP API base URL. None means DEP is not configured.
            session_token: Value for the X-ADM-Auth-Session header.
            limit: Devices requested per page.
            timeout: Per-request timeout in seconds.
            max_pages: Upper bound on pages followed in one fetch.
            transport: Optional httpx transport, used by tests.
        """
        self._base_url = base_url.rstrip("/") if base_url else None
        self._session_token = session_token
        self._limit = limit
        self._timeout = timeout
        self._max_pages = max_pages
        self._transport = transport

    def fetch_devices(self) -> list[DEPDevice]:
        if not self._base_url:
            raise DEPFetchError("dep server not configured")

        headers = {"Content-Type": "application/json;charset=UTF8"}
        if self._session_token:
            headers[SESSION_HEADER] = self._session_token

        devices: list[DEPDevice] = []
        cursor: Optional[str] = None
        with httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            for _ in range(self._max_pages):
                page = self._fetch_page(client, headers, cursor)
                devices.extend(_to_devices(page.get("devices") or []))
                next_cursor = page.get("cursor")
                if not page.get("more_to_follow") or not next_cursor:
                    break
                if next_cursor == cursor:
                    raise DEPFetchError(f"cursor {next_cursor!r} did not advance")
                cursor = next_cursor
            else:
                raise DEPFetchError(f"more than {self._max_pages} pages")

        logger.info("DEP returned %d devices.", len(devices))
        return devices

    def _fetch_page(
        self, client: httpx.Client, headers: dict[str, str], cursor: Optional[str]
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"limit": self._limit}
        if cursor:
            payload["cursor"] = cursor
        try:
            resp = client.post(DEVICES_PATH, json=payload, headers=headers)
            resp.raise_for_status()
            page = resp.json()
        except httpx.HTTPStatusError as exc:
            raise DEPFetchError(f"status {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise DEPFetchError(str(exc)) from exc
        if not isinstance(page, dict):
            raise DEPFetchError("unexpected response shape")
        return page


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _to_devices(items: list[Any]) -> list[DEPDevice]:
    try:
        return [_to_device(item) for item in items]
    except (AttributeError, TypeError, ValueError) as exc:
        raise DEPFetchError(f"malformed device record: {exc}") from exc


def _to_device(item: dict[str, Any]) -> DEPDevice:
    return DEPDevice(
        serial_number=item.get("serial_number", ""),
        model=item.get("model", ""),
        description=item.get("description", ""),
        color=item.get("color", ""),
        asset_tag=item.get("asset_tag", ""),
        profile_status=item.get("profile_status", ""),
        profile_uuid=item.get("profile_uuid", ""),
        profile_assign_time=_parse_time(item.get("profile_assign_time")),
        device_assigned_date=_parse_time(item.get("device_assigned_date")),
        device_assigned_by=item.get("device_assigned_by", ""),
        os=item.get("os", ""),
        device_family=item.get("device_family", ""),
    )

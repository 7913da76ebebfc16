"""
Tests for the management application layer.

Use cases are tested against a mocked ManagementService.
DefaultManagementService is tested against in-memory port fakes.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from mdm_management.application.management.add_profile import AddProfileUseCase
from mdm_management.application.management.delete_profile import (
    DeleteProfileUseCase,
)
from mdm_management.application.management.dtos import (
    AddProfileRequest,
    DeleteProfileRequest,
    FetchDevicesRequest,
    ListProfilesRequest,
    ShowProfileRequest,
)
from mdm_management.application.management.fetch_devices import FetchDevicesUseCase
from mdm_management.application.management.list_profiles import (
    ListProfilesUseCase,
)
from mdm_management.application.management.service import DefaultManagementService
from mdm_management.application.management.show_profile import ShowProfileUseCase
from mdm_management.domain.management.entities import DEPDevice, Profile
from mdm_management.domain.management.errors import (
    DEPFetchError,
    ProfileExistsError,
    ProfileNotFoundError,
)
from mdm_management.domain.management.ports import (
    DEPDeviceSource,
    ManagementService,
    ProfileRepository,
)
from mdm_management.shared.context import RequestContext

UUID = "6f1a7d2e-3b4c-4d5e-8f90-112233445566"
CTX = RequestContext(request_id="test")


class FakeProfileRepository(ProfileRepository):
    """Dictionary-backed profile store."""

    def __init__(self) -> None:
        self.profiles: dict[str, Profile] = {}

    def get(self, uuid: str) -> Optional[Profile]:
        return self.profiles.get(uuid)

    def get_by_identifier(self, payload_identifier: str) -> Optional[Profile]:
        for profile in self.profiles.values():
            if profile.payload_identifier == payload_identifier:
                return profile
        return None

    def list_all(self) -> list[Profile]:
        return list(self.profiles.values())

    def save(self, profile: Profile) -> None:
        self.profiles[profile.uuid] = profile

    def delete(self, uuid: str) -> bool:
        return self.profiles.pop(uuid, None) is not None


class FakeDEPDeviceSource(DEPDeviceSource):
    def __init__(self, devices: list[DEPDevice]) -> None:
        self.devices = devices

    def fetch_devices(self) -> list[DEPDevice]:
        return list(self.devices)


@pytest.fixture
def service() -> MagicMock:
    return MagicMock(spec=ManagementService)


@pytest.fixture
def repo() -> FakeProfileRepository:
    return FakeProfileRepository()


@pytest.fixture
def default_service(repo: FakeProfileRepository) -> DefaultManagementService:
    return DefaultManagementService(
        profile_repo=repo,
        dep_source=FakeDEPDeviceSource([DEPDevice(serial_number="C02ABC")]),
    )


class TestUseCases:
    """Each use case wraps the service result or domain error in an envelope."""

    def test_fetch_devices(self, service: MagicMock) -> None:
        devices = [DEPDevice(serial_number="C02ABC")]
        service.fetch_devices.return_value = devices
        response = FetchDevicesUseCase(service).execute(CTX, FetchDevicesRequest())
        assert response.devices == devices
        assert response.error is None
        service.fetch_devices.assert_called_once_with(CTX)

    def test_fetch_devices_error(self, service: MagicMock) -> None:
        service.fetch_devices.side_effect = DEPFetchError("down")
        response = FetchDevicesUseCase(service).execute(CTX, FetchDevicesRequest())
        assert isinstance(response.error, DEPFetchError)
        assert response.devices == []

    def test_add_profile(self, service: MagicMock) -> None:
        stored = Profile(payload_identifier="com.example", uuid=UUID)
        service.add_profile.return_value = stored
        request = AddProfileRequest(profile=Profile(payload_identifier="com.example"))
        response = AddProfileUseCase(service).execute(CTX, request)
        assert response.profile == stored
        service.add_profile.assert_called_once_with(CTX, request.profile)

    def test_add_profile_conflict(self, service: MagicMock) -> None:
        service.add_profile.side_effect = ProfileExistsError("com.example")
        response = AddProfileUseCase(service).execute(
            CTX, AddProfileRequest(profile=Profile(payload_identifier="com.example"))
        )
        assert isinstance(response.error, ProfileExistsError)
        assert response.profile is None

    def test_list_profiles(self, service: MagicMock) -> None:
        service.list_profiles.return_value = []
        response = ListProfilesUseCase(service).execute(CTX, ListProfilesRequest())
        assert response.profiles == []
        assert response.error is None

    def test_show_profile_not_found(self, service: MagicMock) -> None:
        service.show_profile.side_effect = ProfileNotFoundError(UUID)
        response = ShowProfileUseCase(service).execute(CTX, ShowProfileRequest(uuid=UUID))
        assert isinstance(response.error, ProfileNotFoundError)
        service.show_profile.assert_called_once_with(CTX, UUID)

    def test_delete_profile(self, service: MagicMock) -> None:
        response = DeleteProfileUseCase(service).execute(
            CTX, DeleteProfileRequest(uuid=UUID)
        )
        assert response.error is None
        assert response.status_code == 204
        service.delete_profile.assert_called_once_with(CTX, UUID)

    def test_unexpected_errors_propagate(self, service: MagicMock) -> None:
        service.list_profiles.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            ListProfilesUseCase(service).execute(CTX, ListProfilesRequest())


class TestDefaultManagementService:
    """Tests for DefaultManagementService orchestration."""

    def test_add_assigns_uuid_and_timestamp(
        self, default_service: DefaultManagementService, repo: FakeProfileRepository
    ) -> None:
        stored = default_service.add_profile(
            CTX, Profile(payload_identifier="com.example.wifi")
        )
        assert len(stored.uuid) == 36
        assert stored.created_at is not None
        assert repo.get(stored.uuid) == stored

    def test_add_duplicate_identifier(
        self, default_service: DefaultManagementService
    ) -> None:
        default_service.add_profile(CTX, Profile(payload_identifier="com.example.wifi"))
        with pytest.raises(ProfileExistsError):
            default_service.add_profile(
                CTX, Profile(payload_identifier="com.example.wifi")
            )

    def test_show_and_list(self, default_service: DefaultManagementService) -> None:
        stored = default_service.add_profile(CTX, Profile(payload_identifier="a"))
        assert default_service.show_profile(CTX, stored.uuid) == stored
        assert default_service.list_profiles(CTX) == [stored]

    def test_show_missing(self, default_service: DefaultManagementService) -> None:
        with pytest.raises(ProfileNotFoundError):
            default_service.show_profile(CTX, UUID)

    def test_delete(self, default_service: DefaultManagementService) -> None:
        stored = default_service.add_profile(CTX, Profile(payload_identifier="a"))
        default_service.delete_profile(CTX, stored.uuid)
        with pytest.raises(ProfileNotFoundError):
            default_service.delete_profile(CTX, stored.uuid)

    def test_fetch_devices(self, default_service: DefaultManagementService) -> None:
        devices = default_service.fetch_devices(CTX)
        assert [d.serial_number for d in devices] == ["C02ABC"]

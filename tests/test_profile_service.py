"""
Tests for ProfileService business rules.
"""

import pytest

from core.exceptions import InvalidProfileError, ProfileNotFoundError
from core.repositories import ProfileRepository
from core.services import ProfileService


@pytest.fixture
def repo(test_session) -> ProfileRepository:
    return ProfileRepository(test_session)


@pytest.fixture
def service(repo) -> ProfileService:
    return ProfileService(repo)


class TestCreateProfile:
    """Tests for create_profile."""

    def test_assigns_fresh_ids(self, service, sample_profile):
        first = service.create_profile(**sample_profile)
        second = service.create_profile(name="Bob", icon=None)

        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_rejects_blank_name(self, service, repo, name):
        with pytest.raises(InvalidProfileError, match="Profile name cannot be empty"):
            service.create_profile(name=name, icon="star")

        assert repo.count() == 0

    def test_keeps_name_as_given(self, service):
        profile = service.create_profile(name="  Alice  ")
        assert profile.name == "  Alice  "

    def test_icon_is_optional(self, service):
        profile = service.create_profile(name="Alice")
        assert profile.icon is None


class TestGetProfile:
    """Tests for get_profile_by_id and list_all_profiles."""

    def test_round_trip(self, service, sample_profile):
        created = service.create_profile(**sample_profile)

        fetched = service.get_profile_by_id(created.id)

        assert (fetched.name, fetched.icon) == ("Alice", "star")

    def test_missing_raises_not_found(self, service):
        with pytest.raises(ProfileNotFoundError) as exc_info:
            service.get_profile_by_id(42)

        assert exc_info.value.profile_id == 42
        assert str(exc_info.value) == "Profile not found with id: 42"

    def test_list_empty(self, service):
        assert service.list_all_profiles() == []

    def test_list_after_creations(self, service):
        for i in range(4):
            service.create_profile(name=f"profile-{i}")

        assert len(service.list_all_profiles()) == 4


class TestUpdateProfile:
    """Tests for update_profile."""

    def test_overwrites_name_and_icon_keeps_id(self, service):
        for i in range(5):
            service.create_profile(name=f"profile-{i}", icon="sun")
        target = service.list_all_profiles()[-1]

        updated = service.update_profile(target.id, name="Bob", icon="moon")

        assert updated.id == target.id
        assert (updated.name, updated.icon) == ("Bob", "moon")
        assert len(service.list_all_profiles()) == 5

    def test_clears_icon_when_none(self, service, sample_profile):
        created = service.create_profile(**sample_profile)

        updated = service.update_profile(created.id, name="Alice", icon=None)

        assert updated.icon is None

    def test_does_not_revalidate_name(self, service, sample_profile):
        created = service.create_profile(**sample_profile)

        updated = service.update_profile(created.id, name="", icon="star")

        assert updated.name == ""

    def test_missing_raises_not_found(self, service, repo):
        with pytest.raises(ProfileNotFoundError):
            service.update_profile(7, name="Bob", icon="moon")

        assert repo.count() == 0


class TestDeleteProfile:
    """Tests for delete_profile."""

    def test_delete_is_final(self, service, sample_profile):
        created = service.create_profile(**sample_profile)

        service.delete_profile(created.id)

        with pytest.raises(ProfileNotFoundError):
            service.get_profile_by_id(created.id)

    def test_missing_raises_not_found(self, service):
        with pytest.raises(ProfileNotFoundError):
            service.delete_profile(99)

    def test_second_delete_raises_not_found(self, service, sample_profile):
        created = service.create_profile(**sample_profile)
        service.delete_profile(created.id)

        with pytest.raises(ProfileNotFoundError):
            service.delete_profile(created.id)

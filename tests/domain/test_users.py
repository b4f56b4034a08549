"""Tests for the user models and field validation rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from userctl.domain.result import UNSET
from userctl.domain.users import (
    MAX_NAME_LENGTH,
    User,
    UserCreateRequest,
    UserUpdateRequest,
    validate_email,
    validate_name,
)


class TestValidateName:
    def test_valid(self) -> None:
        assert validate_name("John Doe").data is True

    def test_empty(self) -> None:
        assert validate_name("").error == "Name cannot be empty"

    def test_at_limit(self) -> None:
        assert validate_name("a" * MAX_NAME_LENGTH).ok

    def test_over_limit(self) -> None:
        result = validate_name("a" * (MAX_NAME_LENGTH + 1))
        assert result.error == "Name cannot exceed 50 characters"

    def test_custom_limit(self) -> None:
        assert validate_name("abcd", max_length=3).error == "Name cannot exceed 3 characters"


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        ["john@example.com", "a@b.co", "first.last+tag@sub.example.org", "x@y.z.w"],
    )
    def test_valid(self, email: str) -> None:
        assert validate_email(email).ok

    def test_empty(self) -> None:
        assert validate_email("").error == "Email cannot be empty"

    @pytest.mark.parametrize(
        "email",
        [
            "invalid-email",
            "no-at.example.com",
            "two@@example.com",
            "a@b@c.com",
            "john@example",
            "john doe@example.com",
            "@example.com",
            "john@.com.",
            "john@example.com\n",
        ],
    )
    def test_invalid_format(self, email: str) -> None:
        assert validate_email(email).error == "Invalid email format"


class TestModels:
    def test_user_frozen(self) -> None:
        user = User(id=1, name="John Doe", email="john@example.com")
        with pytest.raises(ValidationError):
            user.name = "Other"  # type: ignore[misc]

    def test_create_request_requires_fields(self) -> None:
        with pytest.raises(ValidationError):
            UserCreateRequest(name="John Doe")  # type: ignore[call-arg]

    def test_update_request_defaults_unset(self) -> None:
        updates = UserUpdateRequest()
        assert updates.name is UNSET
        assert updates.email is UNSET
        assert updates.provided_fields() == []

    def test_update_request_tracks_provided_fields(self) -> None:
        assert UserUpdateRequest(email="a@b.co").provided_fields() == ["email"]
        assert UserUpdateRequest(name="", email="a@b.co").provided_fields() == ["name", "email"]

"""User record, request models, and field validation rules.

Validation returns a Result instead of raising, so the models themselves
carry no pydantic constraints: a ``User`` only ever comes out of
:class:`~userctl.services.users.UserService`, after these checks passed.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from userctl.domain.result import UNSET, Result, Unset, err, ok
from userctl.domain.validators import is_not_empty, is_not_undefined

MAX_NAME_LENGTH = 50

# local@domain.tld with no whitespace and exactly one "@"
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class User(BaseModel):
    """Immutable user record. Identity is ``id``."""

    model_config = {"frozen": True}

    id: int
    name: str
    email: str


class UserCreateRequest(BaseModel):
    """Fields required to create a user."""

    model_config = {"frozen": True}

    name: str
    email: str


class UserUpdateRequest(BaseModel):
    """Partial update. A field left as :data:`UNSET` keeps its stored value."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    name: str | Unset = UNSET
    email: str | Unset = UNSET

    def provided_fields(self) -> list[str]:
        """Names of the fields explicitly supplied, in declaration order."""
        return [
            field_name
            for field_name in type(self).model_fields
            if is_not_undefined(getattr(self, field_name))
        ]


def validate_name(name: str, *, max_length: int = MAX_NAME_LENGTH) -> Result[bool]:
    if not is_not_empty(name):
        return err("Name cannot be empty")
    if len(name) > max_length:
        return err(f"Name cannot exceed {max_length} characters")
    return ok(True)


def validate_email(email: str) -> Result[bool]:
    if not is_not_empty(email):
        return err("Email cannot be empty")
    if EMAIL_PATTERN.fullmatch(email) is None:
        return err("Invalid email format")
    return ok(True)

"""End-to-end demonstration of the Result-typed user service.

Creates a user, fetches it back by id, maps the record to its name and
unwraps it with a default, short-circuiting on the first failure.
"""

from __future__ import annotations

from userctl.domain.combinators import is_success, map_result, unwrap_or
from userctl.domain.conversions import to_string
from userctl.domain.result import Result, err, ok
from userctl.domain.users import User, UserCreateRequest
from userctl.services.users import UserService

DEMO_REQUEST = UserCreateRequest(name="John Doe", email="john@example.com")


def demonstrate(service: UserService | None = None) -> Result[str]:
    """Run the demonstration against *service* (a fresh store by default)."""
    svc = service if service is not None else UserService()

    created = svc.create(DEMO_REQUEST)
    if not is_success(created):
        return err(f"Failed to create user: {created.error or 'unknown error'}")

    id_text = unwrap_or(to_string(created.data.id), "")
    fetched = svc.get_by_id(id_text)
    if not is_success(fetched):
        return err(f"Failed to get user: {fetched.error or 'unknown error'}")

    user_name = unwrap_or(map_result(fetched, _user_name), "Unknown")
    return ok(f"Successfully demonstrated Result-typed services with user: {user_name}")


def _user_name(user: User) -> str:
    return user.name

"""Explicit, total conversions from untyped values.

Each converter inspects the runtime type with an explicit ``isinstance``
branch and returns a Result. Nothing is coerced implicitly and nothing
raises: unsupported input becomes an Err naming the offending value or type.

``bool`` is a subclass of ``int`` in Python, so every converter checks for
it before the numeric branch.
"""

from __future__ import annotations

import re

from userctl.domain.combinators import unwrap_or
from userctl.domain.result import UNSET, Result, err, ok

_INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def type_name(value: object) -> str:
    """Readable type name for error messages (``null`` / ``undefined`` for the markers)."""
    if value is None:
        return "null"
    if value is UNSET:
        return "undefined"
    return type(value).__name__


def to_number(value: object) -> Result[int | float]:
    """Convert *value* to a number.

    Numbers pass through unchanged. Strings are parsed after stripping
    surrounding whitespace: integral text becomes an ``int``, decimal or
    exponent text a ``float``.

    Examples:
        >>> to_number("42").data
        42
        >>> to_number(" 2.5 ").data
        2.5
        >>> to_number("abc").error
        'Cannot convert "abc" to number'
    """
    if isinstance(value, bool):
        return err("Cannot convert bool to number")
    if isinstance(value, (int, float)):
        return ok(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_TEXT.fullmatch(text):
            try:
                return ok(int(text))
            except ValueError:
                # beyond sys.get_int_max_str_digits()
                return err(f'Cannot convert "{value}" to number')
        if _DECIMAL_TEXT.fullmatch(text):
            return ok(float(text))
        return err(f'Cannot convert "{value}" to number')
    return err(f"Cannot convert {type_name(value)} to number")


def to_string(value: object) -> Result[str]:
    """Convert *value* to its textual rendering.

    Booleans render as ``"true"`` / ``"false"``, ``None`` as ``"null"`` and
    :data:`UNSET` as ``"undefined"``. Numbers use Python's ``str()``, so
    ``1.0`` renders as ``"1.0"`` and the non-finite floats as ``"nan"`` /
    ``"inf"``. Integers too long for ``str()`` are an Err.
    """
    if isinstance(value, str):
        return ok(value)
    if isinstance(value, bool):
        return ok("true" if value else "false")
    if isinstance(value, (int, float)):
        try:
            return ok(str(value))
        except ValueError:
            return err(f"Cannot convert {type_name(value)} to string: too many digits")
    if value is None:
        return ok("null")
    if value is UNSET:
        return ok("undefined")
    return err(f"Cannot convert {type_name(value)} to string")


def to_boolean(value: object) -> Result[bool]:
    """Convert *value* to a boolean.

    Accepts booleans, the case-insensitive strings ``"true"`` / ``"false"``
    and the numbers ``0`` / ``1``. Everything else is an Err.
    """
    if isinstance(value, bool):
        return ok(value)
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return ok(True)
        if lowered == "false":
            return ok(False)
        return err(f'Cannot convert "{value}" to boolean')
    if isinstance(value, (int, float)):
        if value == 0:
            return ok(False)
        if value == 1:
            return ok(True)
        rendered = to_string(value)
        return err(f"Cannot convert number {unwrap_or(rendered, type_name(value))} to boolean")
    return err(f"Cannot convert {type_name(value)} to boolean")

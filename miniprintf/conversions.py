"""Renderers for the individual conversion specifiers.

Each function turns one argument into the exact text its conversion
produces. Integers wrap to the widths of the C types they stand for:
32-bit ``int``/``unsigned int`` and 64-bit addresses.
"""

from __future__ import annotations

_INT_BITS = 32
_PTR_BITS = 64
_UINT_MOD = 1 << _INT_BITS
_PTR_MOD = 1 << _PTR_BITS

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def format_char(value: int | str) -> str:
    """Render ``%c``: a one-character string, or an int reduced to one byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_require_int(value, "%c") & 0xFF)


def format_string(value: str | None) -> str:
    """Render ``%s``: ``None`` becomes ``(null)``; text stops at a NUL."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def format_pointer(address: object) -> str:
    """Render ``%p``: lowercase hex with ``0x``, or ``(nil)`` for a null address.

    An int is taken as the address itself; any other object is identified
    by its ``id``.
    """
    if address is None:
        return NULL_POINTER
    if isinstance(address, int) and not isinstance(address, bool):
        value = address % _PTR_MOD
    else:
        value = id(address) % _PTR_MOD
    if value == 0:
        return NULL_POINTER
    return f"{POINTER_PREFIX}{value:x}"


def format_int(value: int) -> str:
    """Render ``%d``/``%i``: a signed 32-bit decimal."""
    wrapped = _require_int(value, "%d") % _UINT_MOD
    if wrapped >= _UINT_MOD // 2:
        wrapped -= _UINT_MOD
    return str(wrapped)


def format_uint(value: int) -> str:
    """Render ``%u``: an unsigned 32-bit decimal."""
    return str(_require_int(value, "%u") % _UINT_MOD)


def format_hex(value: int, spec: str) -> str:
    """Render ``%x`` or ``%X``: unsigned 32-bit hex in the case the spec asks for."""
    if spec not in ("x", "X"):
        raise ValueError(f"hex conversion expects 'x' or 'X', got {spec!r}")
    wrapped = _require_int(value, f"%{spec}") % _UINT_MOD
    return format(wrapped, spec)
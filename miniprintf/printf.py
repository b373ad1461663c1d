"""A small printf supporting ``%c %s %p %d %i %u %x %X %%``.

Any other character after ``%`` produces no output and consumes no
argument; a ``%`` at the very end of the format is dropped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, Callable, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_uint,
)


class FormatArgumentError(TypeError):
    """An argument is missing or does not suit its conversion."""


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def format_arg(spec: str, args: Iterable[Any]) -> str:
    """Render one conversion, taking its argument from ``args`` if it needs one.

    Pass an iterator to have consumed arguments stay consumed between calls.
    """
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(iter(args))
    except StopIteration:
        raise FormatArgumentError(f"missing argument for %{spec}") from None
    try:
        return converter(value)
    except (TypeError, ValueError) as exc:
        raise FormatArgumentError(f"bad argument for %{spec}: {exc}") from exc


def _render(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            yield format_arg(next(chars, ""), args)
        else:
            yield char


def sprintf(fmt: str | None, *args: Any) -> str:
    """Return the formatted text; a ``None`` format gives an empty string."""
    if fmt is None:
        return ""
    return "".join(_render(fmt, iter(args)))


def printf(fmt: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    if text:
        (sys.stdout if file is None else file).write(text)
    return len(text)
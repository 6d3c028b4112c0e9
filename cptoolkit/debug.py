"""Debug printing of values in a brace notation, and small output helpers."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

ONLINE_JUDGE_VAR = "ONLINE_JUDGE"
"""When this environment variable is set, :func:`debug` prints nothing."""


def format_value(value: Any) -> str:
    """Render ``value`` the way the debug printer shows it.

    Booleans are ``true``/``false``, strings are double-quoted, floats use six
    significant digits, and containers become ``{a,b,...}``. Mappings are shown
    as a container of ``{key,value}`` pairs.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Mapping):
        inner = ",".join(
            f"{{{format_value(k)},{format_value(v)}}}" for k, v in value.items()
        )
        return f"{{{inner}}}"
    if isinstance(value, Iterable):
        return "{" + ",".join(format_value(item) for item in value) + "}"
    return str(value)


def format_debug(names: str, *args: Any) -> str:
    """Return the line ``[names] = [v1, v2, ...]`` followed by a newline."""
    rendered = ", ".join(format_value(arg) for arg in args)
    return f"[{names}] = [{rendered}]\n"


def debug(names: str, *args: Any, stream: TextIO | None = None) -> None:
    """Write :func:`format_debug` output to ``stream`` (standard error by default).

    Nothing is written when the ``ONLINE_JUDGE`` environment variable is set.
    """
    if ONLINE_JUDGE_VAR in os.environ:
        return
    target = sys.stderr if stream is None else stream
    target.write(format_debug(names, *args))


def case_prefix(t: int) -> str:
    """Return the ``Case #t: `` prefix used by case-numbered judges."""
    return f"Case #{t}: "


def format_vector(values: Iterable[Any]) -> str:
    """Return the values each followed by a space, then a newline."""
    return "".join(f"{value} " for value in values) + "\n"
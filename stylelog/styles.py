"""
Log style selection.

A middleware instance binds exactly one ``LogStyle`` when it is built. Unknown
values never raise: they fall back to ``LogStyle.DEFAULT`` and a single
warning is written to the console.
"""

from enum import Enum
from typing import Any

from stylelog.console import RESET, YELLOW, Console


class LogStyle(str, Enum):
    """Output layouts supported by the request logger."""

    MINIFIED = "minified"
    INLINE = "inline"
    AGENT = "agent"
    ERROR = "error"
    DEFAULT = "default"


VALID_LOG_STYLES: frozenset[str] = frozenset(style.value for style in LogStyle)
DEFAULT_LOG_STYLE = LogStyle.DEFAULT


def invalid_style_warning(option: Any) -> str:
    """Build the two-line notice shown when a style is rejected."""
    return (
        f"{YELLOW}** Invalid style option: {option} **\n"
        f"** Logger middleware will use the default log style. **{RESET}"
    )


def is_valid_style(option: Any) -> bool:
    # Exact match only: no case folding or trimming
    return isinstance(option, str) and option in VALID_LOG_STYLES


def effective_style(option: Any) -> LogStyle:
    """The style ``option`` selects, without reporting anything."""
    return LogStyle(option) if is_valid_style(option) else DEFAULT_LOG_STYLE


def resolve_style(option: Any, console: Console) -> LogStyle:
    """
    Return the style named by ``option``, or the default.

    A rejected value is reported once through ``console``.
    """
    if not is_valid_style(option):
        console.write(invalid_style_warning(option))
    return effective_style(option)

"""Positional formatting for templates that come from third-party packs."""

from __future__ import annotations

import re
import string
from typing import Any, Sequence

from langhost.services.exceptions import FormatFailure

# Widths/precisions above this are refused so a pack cannot allocate huge strings.
MAX_FIELD_WIDTH = 1024

_NUMBER = re.compile(r"\d+")


class PositionalFormatter(string.Formatter):
    """``str.format`` restricted to bare positional fields like ``{0}`` and ``{}``."""

    def get_field(self, field_name: str, args: Sequence[Any], kwargs: dict[str, Any]):
        if not field_name.isdigit():
            raise FormatFailure(f"Unsupported placeholder {{{field_name}}}.")
        return self.get_value(int(field_name), args, kwargs), field_name

    def format_field(self, value: Any, format_spec: str) -> Any:
        for number in _NUMBER.findall(format_spec):
            if int(number) > MAX_FIELD_WIDTH:
                raise FormatFailure(f"Format spec {format_spec!r} is too wide.")
        return super().format_field(value, format_spec)


_formatter = PositionalFormatter()


def format_template(template: str, args: Sequence[Any] = ()) -> str:
    try:
        return _formatter.vformat(template, tuple(args), {})
    except FormatFailure:
        raise
    except (IndexError, KeyError, ValueError, TypeError, AttributeError) as exc:
        raise FormatFailure(f"Cannot format {template!r}: {exc}") from exc


__all__ = ["MAX_FIELD_WIDTH", "PositionalFormatter", "format_template"]

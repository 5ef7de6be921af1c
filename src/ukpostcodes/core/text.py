from __future__ import annotations

from decimal import Decimal
from urllib.parse import quote


def format_number(value: float) -> str:
    """
    Plain decimal rendering of a coordinate for query strings.

    repr() gives the shortest round-tripping digits, Decimal drops the
    exponent so 1e-05 goes out as 0.00001.
    """
    return format(Decimal(repr(float(value))), "f")


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def build_params(*pairs: tuple[str, object]) -> tuple[tuple[str, str], ...]:
    """
    Query string pairs for one request. None, zero, False and empty values
    are left out so postcodes.io applies its own defaults.
    """
    return tuple((key, format_value(value)) for key, value in pairs if value)


def path_segment(value: str) -> str:
    # postcodes may contain spaces ("EH12 8NF"); keep them inside one segment
    return quote(str(value).strip(), safe="")


def join_filters(filters: list[str] | tuple[str, ...] | None) -> str | None:
    if not filters:
        return None
    names = [f.strip() for f in filters if f and f.strip()]
    return ",".join(names) or None

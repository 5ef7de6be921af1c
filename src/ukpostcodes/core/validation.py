from __future__ import annotations

from ukpostcodes.core.errors import ValidationError

MAX_LIMIT = 100
MAX_POSTCODE_RADIUS = 2000
MAX_OUTCODE_RADIUS = 25000


def check_limit(limit: int | None, maximum: int = MAX_LIMIT) -> None:
    if limit is not None and limit > maximum:
        raise ValidationError(f"Maximum limit exceeded! Limit must be less than {maximum}")


def check_radius(radius: int | None, maximum: int = MAX_POSTCODE_RADIUS) -> None:
    if radius is not None and radius > maximum:
        raise ValidationError(f"Maximum radius exceeded! Radius must be less than {maximum}")

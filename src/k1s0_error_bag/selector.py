"""Field selector parsing."""

from __future__ import annotations

from .models import FieldSelector

DEFAULT_DELIMITER = ":"


def parse_selector(value: str, delimiter: str = DEFAULT_DELIMITER) -> FieldSelector | None:
    """Parse "field:rule" into a FieldSelector.

    Splits on the first delimiter. Returns None when the delimiter is missing.
    """
    idx = value.find(delimiter)
    if idx < 0:
        return None
    return FieldSelector(field=value[:idx], rule=value[idx + len(delimiter) :])

"""Error bag configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ErrorBagError, ErrorBagErrorCodes
from .selector import DEFAULT_DELIMITER


class ErrorBagConfig(BaseModel):
    """ErrorBag settings."""

    selector_delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1)


def parse_config(data: Mapping[str, Any]) -> ErrorBagConfig:
    """Validate a raw settings mapping, e.g. a section of an application config."""
    try:
        return ErrorBagConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ErrorBagError(
            code=ErrorBagErrorCodes.INVALID_CONFIG,
            message=f"Invalid error bag config: {e}",
            cause=e,
        ) from e

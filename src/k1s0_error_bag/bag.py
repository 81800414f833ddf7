"""ErrorBag: ordered in-memory collection of validation error messages."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, overload

from .config import ErrorBagConfig, parse_config
from .models import ErrorEntry, FieldSelector
from .selector import parse_selector

logger = logging.getLogger(__name__)


class ErrorBag:
    """Validation error messages keyed by field, rule and optional scope.

    Insertion order is preserved. Every lookup compares scope exactly: omitting
    the scope only matches entries that were added without one.
    """

    def __init__(self, config: ErrorBagConfig | Mapping[str, Any] | None = None) -> None:
        if config is None:
            config = ErrorBagConfig()
        elif not isinstance(config, ErrorBagConfig):
            config = parse_config(config)
        self._config = config
        self._items: list[ErrorEntry] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ErrorEntry]:
        return iter(list(self._items))

    @property
    def items(self) -> list[ErrorEntry]:
        """Returns a copy of all entries in insertion order."""
        return list(self._items)

    def add(self, field: str, message: str, rule: str, scope: str | None = None) -> None:
        """Appends an error message for the field."""
        self._items.append(ErrorEntry(field=field, message=message, rule=rule, scope=scope))
        logger.debug(
            "Validation error added",
            extra={"field": field, "rule": rule, "scope": scope},
        )

    def count(self) -> int:
        """Returns the number of entries across all scopes."""
        return len(self._items)

    def remove(self, field: str, scope: str | None = None) -> None:
        """Removes every entry for the field within exactly the given scope."""
        kept = [e for e in self._items if not e.matches(field, scope=scope)]
        removed = len(self._items) - len(kept)
        self._items = kept
        logger.debug(
            "Validation errors removed",
            extra={"field": field, "scope": scope, "removed": removed},
        )

    def clear(self, scope: str | None = None) -> None:
        """Removes the entries of a scope, or every entry when no scope is given."""
        before = len(self._items)
        if scope is None:
            self._items = []
        else:
            self._items = [e for e in self._items if e.scope != scope]
        logger.debug(
            "Validation errors cleared",
            extra={"scope": scope, "removed": before - len(self._items)},
        )

    def selector(self, value: str) -> FieldSelector | None:
        """Parses "field:rule"; returns None when there is no delimiter."""
        return parse_selector(value, self._config.selector_delimiter)

    def has(self, field: str, scope: str | None = None) -> bool:
        """Returns True if an entry matches the field or "field:rule" selector."""
        return self._find(field, scope) is not None

    def first(self, field: str, scope: str | None = None) -> str | None:
        """Returns the first message matching the field or "field:rule" selector."""
        entry = self._find(field, scope)
        return entry.message if entry is not None else None

    def first_of(self, field: str, rule: str, scope: str | None = None) -> str | None:
        """Returns the first message for the field produced by the rule."""
        for entry in self._items:
            if entry.matches(field, rule, scope=scope):
                return entry.message
        return None

    def first_rule(self, field: str, scope: str | None = None) -> str | None:
        """Returns the rule name of the first entry for the field."""
        for entry in self._items:
            if entry.matches(field, scope=scope):
                return entry.rule
        return None

    def first_not(self, field: str, rule: str, scope: str | None = None) -> str | None:
        """Returns the first message for the field produced by any other rule."""
        for entry in self._items:
            if entry.matches(field, scope=scope) and entry.rule != rule:
                return entry.message
        return None

    def all(self, scope: str | None = None) -> list[str]:
        """Returns every message within the scope in insertion order."""
        return [e.message for e in self._items if e.matches(scope=scope)]

    @overload
    def collect(self, field: str, scope: str | None = None) -> list[str]: ...

    @overload
    def collect(self, field: None = None, scope: str | None = None) -> dict[str, list[str]]: ...

    def collect(
        self, field: str | None = None, scope: str | None = None
    ) -> list[str] | dict[str, list[str]]:
        """Returns the messages of a field, or all messages grouped by field.

        Grouped keys follow the order in which each field was first added.
        """
        if field is not None:
            return [e.message for e in self._items if e.matches(field, scope=scope)]
        grouped: dict[str, list[str]] = {}
        for entry in self._items:
            if entry.matches(scope=scope):
                grouped.setdefault(entry.field, []).append(entry.message)
        return grouped

    def any(self, scope: str | None = None) -> bool:
        """Returns True if the scope holds at least one entry."""
        return any(e.matches(scope=scope) for e in self._items)

    def _find(self, field: str, scope: str | None) -> ErrorEntry | None:
        selector = self.selector(field)
        for entry in self._items:
            if selector is not None:
                if entry.matches(selector.field, selector.rule, scope=scope):
                    return entry
            elif entry.matches(field, scope=scope):
                return entry
        return None

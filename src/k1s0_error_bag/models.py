"""Error bag data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorEntry:
    """A single validation failure recorded in an ErrorBag."""

    field: str
    message: str
    rule: str
    scope: str | None = None

    def matches(
        self,
        field: str | None = None,
        rule: str | None = None,
        *,
        scope: str | None = None,
    ) -> bool:
        """Returns True if the entry matches the given filters.

        field and rule are skipped when None. scope is always compared exactly,
        so None only matches unscoped entries.
        """
        if field is not None and self.field != field:
            return False
        if rule is not None and self.rule != rule:
            return False
        return self.scope == scope


@dataclass(frozen=True)
class FieldSelector:
    """Parsed "field:rule" selector."""

    field: str
    rule: str

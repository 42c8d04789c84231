"""Exception hierarchy for crn_incidence."""

from __future__ import annotations

from typing import Any, Mapping


class CRNIncidenceError(Exception):
    """Base exception for crn_incidence failures."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class InvalidNetworkError(CRNIncidenceError, ValueError):
    """Malformed reaction data (bad stoichiometry, empty reaction, bad species)."""


__all__ = ["CRNIncidenceError", "InvalidNetworkError"]

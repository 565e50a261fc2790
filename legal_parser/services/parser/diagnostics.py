"""Explicit diagnostic channel for degraded parses."""

from __future__ import annotations

from typing import List, Optional

from ...schemas.legal_document import DiagnosticKind, ParseDiagnostic
from ...utils.logging import get_logger

logger = get_logger(__name__)


class Diagnostics:
    """
    Collects every "could not find X, falling back" notice of one parse.

    Each entry is kept as a :class:`ParseDiagnostic` value for the caller and
    mirrored to the log at WARNING.
    """

    def __init__(self):
        self._items: List[ParseDiagnostic] = []

    def warn(
        self,
        kind: DiagnosticKind,
        location: str,
        message: str,
        offset: Optional[int] = None,
        article: Optional[str] = None,
    ) -> ParseDiagnostic:
        diagnostic = ParseDiagnostic(
            kind=kind,
            location=location,
            message=message,
            offset=offset,
            article=article,
        )
        self._items.append(diagnostic)
        logger.warning(
            f"[{location}] {message}",
            extra={"kind": kind.value, "location": location, "article": article},
        )
        return diagnostic

    @property
    def items(self) -> List[ParseDiagnostic]:
        return list(self._items)

    def of_kind(self, kind: DiagnosticKind) -> List[ParseDiagnostic]:
        return [d for d in self._items if d.kind == kind]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

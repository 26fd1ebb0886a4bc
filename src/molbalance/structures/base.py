"""Base interface for external structure sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from molbalance.models import ExternalStructure


class StructureSource(ABC):
    """Looks up 3D atom and bond data for a formula."""

    @abstractmethod
    def fetch(self, formula: str) -> Optional[ExternalStructure]:
        """Return structure data for ``formula``, or None when nothing usable is found.

        Implementations must return within a bounded time and must not raise
        for lookup failures.
        """
        pass

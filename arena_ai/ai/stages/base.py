"""Base class for decision pipeline stages.

PolicyStage — Abstract base class; subclass and implement ``name`` and ``run()``.

Stages run in a fixed order and share one ``DecisionContext``.  A stage may
set or clear fields of ``ctx.draft``; it must never call back into an
earlier stage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arena_ai.ai.context import DecisionContext


class PolicyStage(ABC):
    """Base class for all pipeline stages."""

    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique stage identifier (e.g. 'evasion', 'engagement')."""

    @abstractmethod
    def run(self, ctx: DecisionContext) -> None:
        """Update ``ctx.draft`` (and target fields) for this tick."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

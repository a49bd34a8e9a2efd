"""ActionDraft — the single output of one policy tick."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class ActionDraft:
    """Mutable action shared by the pipeline stages during one tick.

    ``None`` headings mean "hold position" and "hold fire".
    """

    move_heading: float | None = None
    aim_heading: float | None = None
    shield_active: bool = False

    @property
    def is_idle(self) -> bool:
        return self.move_heading is None and self.aim_heading is None and not self.shield_active

    def sanitized(self) -> ActionDraft:
        """Copy with any non-finite heading dropped to ``None``."""
        move = self.move_heading
        aim = self.aim_heading
        return ActionDraft(
            move_heading=move if move is not None and math.isfinite(move) else None,
            aim_heading=aim if aim is not None and math.isfinite(aim) else None,
            shield_active=bool(self.shield_active),
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the host's action object."""
        return {
            "moveDirection": self.move_heading,
            "shoot": self.aim_heading,
            "shield": self.shield_active,
        }

    def __repr__(self) -> str:
        def fmt(a: float | None) -> str:
            return "hold" if a is None else f"{math.degrees(a):.0f}deg"
        return f"Action(move={fmt(self.move_heading)}, aim={fmt(self.aim_heading)}, shield={self.shield_active})"

"""Action output of the policy."""

from arena_ai.actions.base import ActionDraft

__all__ = ["ActionDraft"]

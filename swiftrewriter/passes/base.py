"""Intention pass base class."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..intentions import IntentionCollection
    from .context import IntentionPassContext


class IntentionPass:
    """A rewrite applied in place to a whole intention collection.

    Subclasses must be idempotent: once applied, a second run finds nothing
    left to rewrite.
    """

    # Tag applied to history records produced by this pass
    history_tag: str = ""

    def __init__(self) -> None:
        if not self.history_tag:
            self.history_tag = type(self).__name__

    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        raise NotImplementedError(type(self).__name__ + ".apply")

    def __repr__(self) -> str:
        return type(self).__name__ + "()"

"""Intention base classes, provenance handles and change history."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, replace
from enum import Enum

from ..ir import AccessLevel


# ============================================================
# PROVENANCE
# ============================================================


class SourceKind(Enum):
    """Kind of Objective-C declaration an intention originated from."""

    CLASS_INTERFACE = "class_interface"
    CLASS_IMPLEMENTATION = "class_implementation"
    CATEGORY_INTERFACE = "category_interface"
    CATEGORY_IMPLEMENTATION = "category_implementation"
    PROTOCOL = "protocol"
    PROPERTY = "property"
    IVAR = "ivar"
    METHOD = "method"
    FUNCTION = "function"
    STRUCT = "struct"


@dataclass(frozen=True)
class SourceNode:
    """Handle to the upstream AST node an intention was built from."""

    kind: SourceKind
    file_path: str = ""
    line: int = 0


# ============================================================
# HISTORY
# ============================================================


@dataclass(frozen=True)
class IntentionHistoryEntry:
    """One audit record: which pass changed an intention, and how."""

    tag: str
    description: str
    related_intentions: tuple[Intention, ...] = ()

    def __str__(self) -> str:
        return "[" + self.tag + "] " + self.description


class IntentionHistory:
    """Append-only log of changes applied to one intention."""

    def __init__(self) -> None:
        self._entries: list[IntentionHistoryEntry] = []

    @property
    def entries(self) -> list[IntentionHistoryEntry]:
        return list(self._entries)

    @property
    def has_changes(self) -> bool:
        return len(self._entries) > 0

    @property
    def summary(self) -> str:
        return "\n".join(str(e) for e in self._entries)

    def record_change(
        self,
        tag: str,
        description: str,
        related_intentions: tuple[Intention, ...] | list[Intention] = (),
    ) -> IntentionHistoryEntry:
        entry = IntentionHistoryEntry(tag, description, tuple(related_intentions))
        self._entries.append(entry)
        return entry

    def record_creation(self, description: str) -> IntentionHistoryEntry:
        return self.record_change("Creation", description)

    def echo(self, entry: IntentionHistoryEntry) -> IntentionHistoryEntry:
        """Append an independent copy of a record made on another intention."""
        copy = replace(entry)
        self._entries.append(copy)
        return copy


# ============================================================
# INTENTIONS
# ============================================================


class Intention:
    """A declaration intended for the generated Swift code.

    parent is a non-owning back-reference to the container currently holding
    this intention. Containers own their members; members only look their
    container up.
    """

    def __init__(self) -> None:
        self.history: IntentionHistory = IntentionHistory()
        self._parent: weakref.ReferenceType[Intention] | None = None

    @property
    def parent(self) -> Intention | None:
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: Intention | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None


class FromSourceIntention(Intention):
    """An intention that may be tied to an Objective-C source declaration."""

    def __init__(
        self, access_level: AccessLevel = AccessLevel.INTERNAL, source: SourceNode | None = None
    ) -> None:
        super().__init__()
        self.access_level: AccessLevel = access_level
        self.source: SourceNode | None = source

"""Pass context and the type system view over an intention collection."""

from __future__ import annotations

from dataclasses import dataclass

from ..intentions import (
    ClassGenerationIntention,
    IntentionCollection,
    ProtocolGenerationIntention,
    StructGenerationIntention,
    TypeGenerationIntention,
)
from ..known_type import KnownType


class IntentionCollectionTypeSystem:
    """Resolves types by name: collection types first, then extra known types."""

    def __init__(
        self,
        collection: IntentionCollection,
        known_types: list[KnownType] | tuple[KnownType, ...] = (),
    ) -> None:
        self.collection = collection
        self._known_types: list[KnownType] = list(known_types)

    def known_type_named(self, type_name: str) -> KnownType | None:
        """Nominal declaration of a type: class, struct or protocol, not extensions."""
        for typ in self.collection.type_intentions():
            if typ.type_name != type_name:
                continue
            if isinstance(
                typ,
                (ClassGenerationIntention, ProtocolGenerationIntention, StructGenerationIntention),
            ):
                return typ
        for known in self._known_types:
            if known.type_name == type_name:
                return known
        return None

    def protocol_named(self, name: str) -> ProtocolGenerationIntention | None:
        for proto in self.collection.protocol_intentions():
            if proto.type_name == name:
                return proto
        return None

    def intentions_named(self, type_name: str) -> list[TypeGenerationIntention]:
        """Class intention and all extensions declared for a type name."""
        return [t for t in self.collection.type_intentions() if t.type_name == type_name]

    def conformances_of(self, type_name: str) -> list[str]:
        """Protocol names a type conforms to across its class and extensions."""
        result: list[str] = []
        for typ in self.intentions_named(type_name):
            for conformance in typ.known_protocol_conformances:
                if conformance.protocol_name not in result:
                    result.append(conformance.protocol_name)
        for known in self._known_types:
            if known.type_name == type_name:
                for conformance in known.known_protocol_conformances:
                    if conformance.protocol_name not in result:
                        result.append(conformance.protocol_name)
        return result

    def types_conforming_to(self, protocol_name: str) -> list[str]:
        result: list[str] = []
        for typ in self.collection.type_intentions():
            if isinstance(typ, ProtocolGenerationIntention):
                continue
            if typ.conforms_to(protocol_name) and typ.type_name not in result:
                result.append(typ.type_name)
        return result


@dataclass
class IntentionPassContext:
    """Shared services handed to every pass."""

    type_system: IntentionCollectionTypeSystem


def make_context(
    collection: IntentionCollection, known_types: list[KnownType] | tuple[KnownType, ...] = ()
) -> IntentionPassContext:
    return IntentionPassContext(IntentionCollectionTypeSystem(collection, known_types))

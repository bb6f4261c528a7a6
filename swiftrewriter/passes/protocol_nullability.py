"""Propagate nullability from protocol requirements to conforming classes."""

from __future__ import annotations

import logging

from ..intentions import (
    BaseClassIntention,
    IntentionCollection,
    ProtocolGenerationIntention,
)
from .base import IntentionPass
from .context import IntentionPassContext
from .type_merging import merge_nullability, merge_signature_nullability

logger = logging.getLogger(__name__)


class ProtocolNullabilityPropagationToConformersIntentionPass(IntentionPass):
    """Members implementing a protocol requirement adopt the requirement's
    nullability annotations wherever the implementation left them unspecified.

    Conformance may be declared on the class itself or on any of its
    extensions; every class-like intention of the type is updated.
    """

    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        type_system = context.type_system
        seen: set[str] = set()
        for cls in collection.class_intentions():
            if cls.type_name in seen:
                continue
            seen.add(cls.type_name)
            for protocol_name in type_system.conformances_of(cls.type_name):
                proto = type_system.protocol_named(protocol_name)
                if proto is None:
                    continue
                for intention in type_system.intentions_named(cls.type_name):
                    if isinstance(intention, BaseClassIntention):
                        self._propagate(proto, intention)

    def _propagate(self, proto: ProtocolGenerationIntention, cls: BaseClassIntention) -> None:
        for method in cls.methods:
            requirement = proto.method_matching_selector(method.signature)
            if requirement is None:
                continue
            merged = merge_signature_nullability(method.signature, requirement.signature)
            if merged == method.signature:
                continue
            method.signature = merged
            method.history.record_change(
                self.history_tag,
                "Propagated nullability from protocol " + proto.type_name + " requirement",
                [requirement],
            )
            logger.debug("%s.%s: nullability from %s", cls.type_name, method.name, proto.type_name)
        for prop in cls.properties:
            requirement_prop = proto.property_named(prop.name)
            if requirement_prop is None:
                continue
            merged_type = merge_nullability(prop.type, requirement_prop.type)
            if merged_type == prop.type:
                continue
            prop.type = merged_type
            prop.history.record_change(
                self.history_tag,
                "Propagated nullability from protocol " + proto.type_name + " requirement",
                [requirement_prop],
            )
            logger.debug("%s.%s: nullability from %s", cls.type_name, prop.name, proto.type_name)

"""Intention passes: in-place rewrites of an intention collection."""

from __future__ import annotations

import logging

from ..intentions import IntentionCollection
from .base import IntentionPass
from .context import IntentionCollectionTypeSystem, IntentionPassContext, make_context
from .file_type_merge import FileTypeMergingIntentionPass
from .import_directives import ImportDirectiveIntentionPass
from .property_merge import PropertyMergeIntentionPass
from .protocol_nullability import ProtocolNullabilityPropagationToConformersIntentionPass
from .stored_properties import StoredPropertyToNominalTypesIntentionPass
from .swiftify_signatures import SwiftifyMethodSignaturesIntentionPass

logger = logging.getLogger(__name__)


def default_intention_passes() -> list[IntentionPass]:
    """The default pipeline. Order matters: later passes expect the model
    normalized by earlier ones."""
    return [
        FileTypeMergingIntentionPass(),
        StoredPropertyToNominalTypesIntentionPass(),
        ProtocolNullabilityPropagationToConformersIntentionPass(),
        PropertyMergeIntentionPass(),
        SwiftifyMethodSignaturesIntentionPass(),
        ImportDirectiveIntentionPass(),
    ]


def apply_intention_passes(
    collection: IntentionCollection,
    context: IntentionPassContext,
    passes: list[IntentionPass] | None = None,
) -> None:
    """Run passes over the collection in order, mutating it in place."""
    if passes is None:
        passes = default_intention_passes()
    for intention_pass in passes:
        logger.debug("running %s", intention_pass.history_tag)
        intention_pass.apply(collection, context)


__all__ = [
    "FileTypeMergingIntentionPass",
    "ImportDirectiveIntentionPass",
    "IntentionCollectionTypeSystem",
    "IntentionPass",
    "IntentionPassContext",
    "PropertyMergeIntentionPass",
    "ProtocolNullabilityPropagationToConformersIntentionPass",
    "StoredPropertyToNominalTypesIntentionPass",
    "SwiftifyMethodSignaturesIntentionPass",
    "apply_intention_passes",
    "default_intention_passes",
    "make_context",
]

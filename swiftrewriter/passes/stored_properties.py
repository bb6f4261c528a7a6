"""Move stored properties and instance variables out of class extensions.

Swift extensions cannot hold stored properties, so anything stored that an
Objective-C category or class extension declares moves to the nominal class
of the same name.
"""

from __future__ import annotations

import logging

from ..intentions import (
    ClassGenerationIntention,
    IntentionCollection,
    PropertyGenerationIntention,
    StoredMode,
)
from .base import IntentionPass
from .context import IntentionPassContext

logger = logging.getLogger(__name__)


def _is_movable_property(prop: PropertyGenerationIntention) -> bool:
    return isinstance(prop.mode, StoredMode) and not prop.is_static


class StoredPropertyToNominalTypesIntentionPass(IntentionPass):
    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        classes: dict[str, ClassGenerationIntention] = {}
        for cls in collection.class_intentions():
            classes.setdefault(cls.type_name, cls)
        for ext in collection.extension_intentions():
            target = classes.get(ext.type_name)
            if target is None:
                continue
            for prop in ext.properties:
                if not _is_movable_property(prop) or target.has_property(prop.name):
                    continue
                target.add_property(prop)
                target.history.record_change(
                    self.history_tag,
                    "Moved stored property " + prop.name + " from " + ext.origin,
                    [prop],
                )
                logger.debug("moved property %s.%s out of extension", ext.type_name, prop.name)
            for ivar in ext.instance_variables:
                if target.has_instance_variable(ivar.name):
                    continue
                target.add_instance_variable(ivar)
                target.history.record_change(
                    self.history_tag,
                    "Moved instance variable " + ivar.name + " from " + ext.origin,
                    [ivar],
                )
                logger.debug("moved ivar %s.%s out of extension", ext.type_name, ivar.name)

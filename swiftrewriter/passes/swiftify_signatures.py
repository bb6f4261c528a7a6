"""Rewrite Objective-C shaped method signatures into Swift conventions.

    - (instancetype)initWithName:(NSString *)name   ->  init(name: String)
    - (void)doThingWithObject:(id)object           ->  func doThing(with object: AnyObject)

A rewrite is skipped when its result would collide with an existing member.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from ..formatter import as_string_signature
from ..ir import INSTANCETYPE, OptionalType, TypeName, deep_unwrapped
from ..intentions import (
    BaseClassIntention,
    InitGenerationIntention,
    IntentionCollection,
    MethodGenerationIntention,
)
from .base import IntentionPass
from .context import IntentionPassContext

logger = logging.getLogger(__name__)

INIT_WITH_RE = re.compile(r"^initWith([A-Z]\w*)$")
WITH_PREPOSITION_RE = re.compile(r"^([a-z]\w*?)With([A-Z]\w*)$")


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


class SwiftifyMethodSignaturesIntentionPass(IntentionPass):
    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        for typ in collection.type_intentions():
            if not isinstance(typ, BaseClassIntention):
                continue
            for method in typ.methods:
                if self._convert_initializer(typ, method):
                    continue
                self._split_with_preposition(typ, method)

    def _convert_initializer(
        self, cls: BaseClassIntention, method: MethodGenerationIntention
    ) -> bool:
        if method.is_static or len(method.parameters) == 0:
            return False
        match = INIT_WITH_RE.match(method.name)
        if match is None:
            return False
        returned = deep_unwrapped(method.return_type)
        if returned != INSTANCETYPE and returned != TypeName(cls.type_name):
            return False
        first = method.parameters[0]
        params = [replace(first, label=_lower_first(match.group(1)))]
        params.extend(method.parameters[1:])
        labels = [p.label for p in params]
        for ctor in cls.constructors:
            if [p.label for p in ctor.parameters] == labels:
                logger.debug("%s.%s: initializer already exists", cls.type_name, method.name)
                return False
        ctor = InitGenerationIntention(
            params,
            method.function_body,
            is_failable=isinstance(method.return_type, OptionalType),
            access_level=method.access_level,
            source=method.source,
        )
        cls.remove_method(method)
        cls.add_constructor(ctor)
        entry = ctor.history.record_change(
            self.history_tag,
            "Converted '" + method.name + "' method to initializer",
            [method],
        )
        cls.history.echo(entry)
        logger.debug("%s: %s", cls.type_name, entry.description)
        return True

    def _split_with_preposition(
        self, cls: BaseClassIntention, method: MethodGenerationIntention
    ) -> bool:
        if len(method.parameters) == 0:
            return False
        first = method.parameters[0]
        if first.label is not None:
            return False
        match = WITH_PREPOSITION_RE.match(method.name)
        if match is None or match.group(1) == "init":
            return False
        if _lower_first(match.group(2)) != first.name:
            return False
        params = [replace(first, label="with")]
        params.extend(method.parameters[1:])
        signature = method.signature.with_name(match.group(1)).with_parameters(params)
        existing = cls.method_matching_selector(signature)
        if existing is not None and existing is not method:
            logger.debug("%s.%s: swiftified name collides", cls.type_name, method.name)
            return False
        old = as_string_signature(method.signature, include_name=True)
        new = as_string_signature(signature, include_name=True)
        method.signature = signature
        method.history.record_change(
            self.history_tag, "Swiftified signature from " + old + " to " + new
        )
        logger.debug("%s: %s -> %s", cls.type_name, old, new)
        return True

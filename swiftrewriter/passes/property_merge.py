"""Collapse getter/setter method pairs into computed properties.

For a property `name`, the candidates are:

    getter: `name() -> T'`             deep_unwrapped(T') == deep_unwrapped(T)
    setter: `setName(_ v: T')` -> Void  deep_unwrapped(T') == deep_unwrapped(T)

A role is matched only when it has exactly one candidate. Resolution:

| getter | setter | outcome                                             |
|--------|--------|-----------------------------------------------------|
| yes    | yes    | get/set property from both bodies; methods removed  |
| yes    | no     | computed property, only when declared `readonly`    |
| no     | yes    | setter removed; with a body, a private `_name` ivar |
|        |        | and a `return _name` getter are synthesized         |
| no     | no     | untouched                                           |
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..formatter import as_string_method, as_string_property
from ..ir import (
    VOID,
    AccessLevel,
    CompoundStatement,
    IdentifierExpression,
    ReturnStatement,
    deep_unwrapped,
)
from ..intentions import (
    BaseClassIntention,
    ComputedMode,
    FunctionBodyIntention,
    GetterSetterMode,
    InstanceVariableContainerIntention,
    InstanceVariableGenerationIntention,
    IntentionCollection,
    MethodGenerationIntention,
    PropertyGenerationIntention,
    PropertySetter,
)
from .base import IntentionPass
from .context import IntentionPassContext

logger = logging.getLogger(__name__)

# Value identifier of the placeholder setter used when an accessor has no body
PLACEHOLDER_VALUE_IDENTIFIER = "value"


def setter_name(property_name: str) -> str:
    """`name` -> `setName`."""
    return "set" + property_name[:1].upper() + property_name[1:]


@dataclass
class _PropertySet:
    prop: PropertyGenerationIntention
    getter: MethodGenerationIntention | None = None
    setter: MethodGenerationIntention | None = None


class PropertyMergeIntentionPass(IntentionPass):
    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        for file in collection.file_intentions():
            for typ in file.type_intentions:
                if isinstance(typ, BaseClassIntention):
                    self.apply_on_class(typ)

    def apply_on_class(self, cls: BaseClassIntention) -> None:
        methods = cls.methods
        matches: list[_PropertySet] = []
        for prop in cls.properties:
            target = deep_unwrapped(prop.type)
            getters = [
                m
                for m in methods
                if m.name == prop.name
                and len(m.parameters) == 0
                and deep_unwrapped(m.return_type) == target
            ]
            expected_setter = setter_name(prop.name)
            setters = [
                m
                for m in methods
                if m.name == expected_setter
                and m.return_type == VOID
                and len(m.parameters) == 1
                and deep_unwrapped(m.parameters[0].type) == target
            ]
            match = _PropertySet(prop)
            if len(getters) == 1:
                match.getter = getters[0]
            elif len(getters) > 1:
                logger.debug(
                    "%s.%s: %d getter candidates, skipping", cls.type_name, prop.name, len(getters)
                )
            if len(setters) == 1:
                match.setter = setters[0]
            elif len(setters) > 1:
                logger.debug(
                    "%s.%s: %d setter candidates, skipping", cls.type_name, prop.name, len(setters)
                )
            if match.getter is None and match.setter is None:
                continue
            matches.append(match)
        for match in matches:
            self._join(match, cls)

    def _join(self, match: _PropertySet, cls: BaseClassIntention) -> None:
        prop = match.prop
        getter = match.getter
        setter = match.setter
        if getter is not None and setter is not None:
            if getter.function_body is not None and setter.function_body is not None:
                prop.mode = GetterSetterMode(
                    getter.function_body,
                    PropertySetter(setter.parameters[0].name, setter.function_body),
                )
            else:
                prop.mode = GetterSetterMode(
                    FunctionBodyIntention(CompoundStatement()),
                    PropertySetter(
                        PLACEHOLDER_VALUE_IDENTIFIER, FunctionBodyIntention(CompoundStatement())
                    ),
                )
            cls.remove_method(getter)
            cls.remove_method(setter)
            description = (
                "Merging getter method "
                + as_string_method(getter, cls)
                + " and setter method "
                + as_string_method(setter, cls)
                + " into a computed property "
                + as_string_property(prop, cls)
            )
            entry = cls.history.record_change(self.history_tag, description)
            prop.history.echo(entry)
            logger.debug("%s: %s", cls.type_name, description)
        elif getter is not None and setter is None:
            if not prop.is_source_read_only:
                return
            body = getter.function_body
            if body is None:
                body = FunctionBodyIntention(CompoundStatement())
            prop.mode = ComputedMode(body)
            cls.remove_method(getter)
            logger.debug("%s.%s: getter merged into read-only property", cls.type_name, prop.name)
        elif setter is not None:
            cls.remove_method(setter)
            setter_body = setter.function_body
            if setter_body is None:
                logger.debug("%s.%s: dropped body-less setter", cls.type_name, prop.name)
                return
            backing_name = "_" + prop.name
            synthesized_getter = FunctionBodyIntention(
                CompoundStatement([ReturnStatement(IdentifierExpression(backing_name))]),
                source=setter_body.source,
            )
            prop.mode = GetterSetterMode(
                synthesized_getter, PropertySetter(setter.parameters[0].name, setter_body)
            )
            if isinstance(cls, InstanceVariableContainerIntention):
                field = InstanceVariableGenerationIntention(
                    backing_name,
                    prop.storage,
                    access_level=AccessLevel.PRIVATE,
                    source=prop.source,
                )
                cls.add_instance_variable(field)
            logger.debug("%s.%s: synthesized backing field %s", cls.type_name, prop.name, backing_name)

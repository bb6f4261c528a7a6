"""Merge declarations of one type spread across files.

An Objective-C class is usually declared in a header (@interface) and defined
in an implementation file (@implementation). Swift wants a single declaration,
so the interface's members are folded into the implementation intention.
The interface contributes nullability annotations; the implementation
contributes bodies.
"""

from __future__ import annotations

import logging

from ..intentions import (
    BaseClassIntention,
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    FileGenerationIntention,
    IntentionCollection,
    MethodGenerationIntention,
    PropertyGenerationIntention,
)
from .base import IntentionPass
from .context import IntentionPassContext
from .type_merging import merge_nullability, merge_signature_nullability

logger = logging.getLogger(__name__)


class FileTypeMergingIntentionPass(IntentionPass):
    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        self._merge_classes(collection)
        self._merge_extensions(collection)
        self._merge_global_functions(collection)
        self._merge_header_files(collection)

    # ── types ────────────────────────────────────────────────

    def _merge_classes(self, collection: IntentionCollection) -> None:
        groups: dict[str, list[ClassGenerationIntention]] = {}
        for cls in collection.class_intentions():
            groups.setdefault(cls.type_name, []).append(cls)
        for classes in groups.values():
            if len(classes) > 1:
                self._merge_group(classes)

    def _merge_extensions(self, collection: IntentionCollection) -> None:
        groups: dict[tuple[str, str | None], list[ClassExtensionGenerationIntention]] = {}
        for ext in collection.extension_intentions():
            groups.setdefault((ext.type_name, ext.category_name), []).append(ext)
        for extensions in groups.values():
            if len(extensions) > 1:
                self._merge_group(extensions)

    def _merge_group(self, intentions: list) -> None:
        target = intentions[0]
        for candidate in intentions:
            if not candidate.is_interface_source:
                target = candidate
                break
        for other in intentions:
            if other is target:
                continue
            merge_type_into(other, target)
            entry = target.history.record_change(
                self.history_tag,
                "Merged " + other.origin + " into " + target.origin,
                [other],
            )
            logger.debug("%s: %s", target.type_name, entry.description)
            owner = other.parent
            if isinstance(owner, FileGenerationIntention):
                owner.remove_type(other)

    # ── global functions ─────────────────────────────────────

    def _merge_global_functions(self, collection: IntentionCollection) -> None:
        functions = collection.global_function_intentions()
        definitions = [f for f in functions if not f.is_declaration_only]
        for declaration in functions:
            if not declaration.is_declaration_only:
                continue
            matches = [
                d
                for d in definitions
                if d.signature.matches_as_selector(declaration.signature)
            ]
            if len(matches) != 1:
                continue
            definition = matches[0]
            definition.signature = merge_signature_nullability(
                definition.signature, declaration.signature
            )
            definition.history.record_change(
                self.history_tag,
                "Merged declaration of function " + declaration.name + " into its definition",
                [declaration],
            )
            owner = declaration.parent
            if isinstance(owner, FileGenerationIntention):
                owner.remove_global_function(declaration)
            logger.debug("merged declaration of function %s", declaration.name)

    # ── files ────────────────────────────────────────────────

    def _merge_header_files(self, collection: IntentionCollection) -> None:
        files = collection.file_intentions()
        implementations = {f.stem: f for f in files if f.is_implementation}
        for header in files:
            if not header.is_header:
                continue
            impl = implementations.get(header.stem)
            if impl is not None:
                _move_file_contents(header, impl)
            if header.is_empty:
                collection.remove_intention(header)
                logger.debug("removed empty header %s", header.source_path)


def merge_type_into(source: BaseClassIntention, target: BaseClassIntention) -> None:
    """Move every member of source into target, merging duplicates."""
    if isinstance(source, ClassGenerationIntention) and isinstance(
        target, ClassGenerationIntention
    ):
        if target.superclass_name is None:
            target.superclass_name = source.superclass_name
    for proto in source.protocols:
        if not target.conforms_to(proto.protocol_name):
            target.add_protocol(proto)
    for prop in source.properties:
        existing = target.property_named(prop.name)
        if existing is None:
            target.add_property(prop)
        else:
            _merge_property(prop, existing)
    for ivar in source.instance_variables:
        if not target.has_instance_variable(ivar.name):
            target.add_instance_variable(ivar)
    for method in source.methods:
        existing_method = target.method_matching_selector(method.signature)
        if existing_method is None:
            target.add_method(method)
        else:
            _merge_method(method, existing_method)
    for ctor in source.constructors:
        if not any(c.parameters == ctor.parameters for c in target.constructors):
            target.add_constructor(ctor)


def _merge_property(source: PropertyGenerationIntention, target: PropertyGenerationIntention) -> None:
    target.type = merge_nullability(target.type, source.type)
    for attribute in source.attributes:
        if attribute in target.attributes:
            continue
        if attribute == "readonly" and "readwrite" in target.attributes:
            continue
        target.attributes.append(attribute)


def _merge_method(source: MethodGenerationIntention, target: MethodGenerationIntention) -> None:
    target.signature = merge_signature_nullability(target.signature, source.signature)
    if target.function_body is None and source.function_body is not None:
        target.function_body = source.function_body


def _move_file_contents(header: FileGenerationIntention, impl: FileGenerationIntention) -> None:
    for typ in header.type_intentions:
        impl.add_type(typ)
    for func in header.global_function_intentions:
        impl.add_global_function(func)
    for directive in header.preprocessor_directives:
        if directive not in impl.preprocessor_directives:
            impl.preprocessor_directives.append(directive)

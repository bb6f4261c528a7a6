"""swiftrewriter: Objective-C declarations to Swift via intention passes.

    Objective-C AST -> intentions -> passes -> backend -> Swift

The front-end that builds intentions from Objective-C source lives outside
this package; everything downstream of an IntentionCollection lives here.
"""

import logging

from .backend.swift import SwiftBackend, emit_swift
from .known_type import KnownTypeBuilder
from .parser import SwiftSyntaxError, parse_parameters, parse_signature, parse_type
from .passes import (
    apply_intention_passes,
    default_intention_passes,
    make_context,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KnownTypeBuilder",
    "SwiftBackend",
    "SwiftSyntaxError",
    "apply_intention_passes",
    "default_intention_passes",
    "emit_swift",
    "make_context",
    "parse_parameters",
    "parse_signature",
    "parse_type",
]

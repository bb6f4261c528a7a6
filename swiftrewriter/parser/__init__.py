"""Signature and type text parsing: public API."""

from __future__ import annotations

from ..ir import FunctionSignature, ParameterSignature, SwiftType
from .parse import Parser
from .tokens import SwiftSyntaxError as SwiftSyntaxError, tokenize as tokenize


def parse_signature(text: str) -> FunctionSignature:
    """Parse a function signature starting at the function name (no `func`).

    Raises SwiftSyntaxError on malformed input, including trailing input
    left over after the signature.
    """
    return Parser(text).parse_signature_text()


def parse_parameters(text: str) -> list[ParameterSignature]:
    """Parse a parenthesized parameter list, e.g. `(_ arg0: Int, arg1: String?)`."""
    return Parser(text).parse_parameters_text()


def parse_type(text: str) -> SwiftType:
    """Parse a Swift type, e.g. `[String: Int]?` or `@escaping (Int) -> Void`."""
    return Parser(text).parse_type_text()

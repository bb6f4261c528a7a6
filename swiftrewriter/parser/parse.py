"""Signature parser: recursive descent, one method per grammar production.

Grammar:

    function-signature
        : 'mutating'? identifier parameter-clause ('throws' | 'rethrows')? return-type?
    return-type
        : '->' type
    parameter-clause
        : '(' (parameter (',' parameter)*)? ')'
    parameter
        : parameter-name ':' parameter-attribute* 'inout'? type
    parameter-name
        : identifier            -- label and name
        | identifier identifier -- label, name
        | '_' identifier        -- no label
    parameter-attribute
        : '@' identifier ('(' identifier ')')?

    type
        : postfix-type ('&' postfix-type)*
    postfix-type
        : primary-type ('?' | '!' | '.' 'Type')*
    primary-type
        : parameter-attribute* '(' tuple-elements? ')' (('throws' | 'rethrows')? '->' type)?
        | '[' type (':' type)? ']'
        | identifier ('.' identifier)* ('<' type (',' type)* '>')?
"""

from __future__ import annotations

from ..ir import (
    VOID,
    ArrayType,
    BlockType,
    BlockTypeAttribute,
    DictionaryType,
    FunctionSignature,
    GenericType,
    ImplicitlyUnwrappedOptionalType,
    MetatypeType,
    OptionalType,
    ParameterSignature,
    ProtocolCompositionType,
    SwiftType,
    TupleType,
    TypeName,
)
from .tokens import TK_EOF, TK_IDENT, SwiftSyntaxError, Token, tokenize

CONVENTIONS: dict[str, BlockTypeAttribute | None] = {
    "c": BlockTypeAttribute.CONVENTION_C,
    "block": BlockTypeAttribute.CONVENTION_BLOCK,
    # Swift calling convention is the default; it adds no attribute
    "swift": None,
}


class Parser:
    """Recursive descent parser over a single signature or type string."""

    def __init__(self, source: str):
        self.source: str = source
        self.tokens: list[Token] = tokenize(source)
        self.pos: int = 0

    # ── Helpers ──────────────────────────────────────────────

    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int) -> Token:
        idx = self.pos + offset
        if idx >= len(self.tokens):
            return self.tokens[len(self.tokens) - 1]
        return self.tokens[idx]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.type != TK_EOF:
            self.pos += 1
        return tok

    def at(self, value: str) -> bool:
        tok = self.current()
        return tok.type != TK_EOF and tok.value == value

    def at_ident(self) -> bool:
        return self.current().type == TK_IDENT

    def expect(self, value: str) -> Token:
        tok = self.current()
        if tok.type == TK_EOF or tok.value != value:
            raise self.error("expected '" + value + "', got " + _describe(tok))
        return self.advance()

    def expect_ident(self) -> Token:
        tok = self.current()
        if tok.type != TK_IDENT:
            raise self.error("expected identifier, got " + _describe(tok))
        return self.advance()

    def expect_eof(self) -> None:
        tok = self.current()
        if tok.type != TK_EOF:
            raise SwiftSyntaxError(
                "Extraneous input '" + self.source[tok.offset :] + "'", tok.offset
            )

    def error(self, msg: str) -> SwiftSyntaxError:
        return SwiftSyntaxError(msg, self.current().offset)

    # ── Entry points ─────────────────────────────────────────

    def parse_signature_text(self) -> FunctionSignature:
        sig = self.parse_function_signature()
        self.expect_eof()
        return sig

    def parse_parameters_text(self) -> list[ParameterSignature]:
        params = self.parse_parameter_clause()
        self.expect_eof()
        return params

    def parse_type_text(self) -> SwiftType:
        typ = self.parse_type()
        self.expect_eof()
        return typ

    # ── Signatures ───────────────────────────────────────────

    def parse_function_signature(self) -> FunctionSignature:
        is_mutating = False
        if self.at("mutating") and self.peek(1).type == TK_IDENT:
            self.advance()
            is_mutating = True
        name_tok = self.expect_ident()
        params = self.parse_parameter_clause()
        if self.at("throws") or self.at("rethrows"):
            self.advance()
        return_type: SwiftType = VOID
        if self.at("->"):
            self.advance()
            return_type = self.parse_type()
        return FunctionSignature(
            name_tok.value, tuple(params), return_type, is_static=False, is_mutating=is_mutating
        )

    def parse_parameter_clause(self) -> list[ParameterSignature]:
        self.expect("(")
        params: list[ParameterSignature] = []
        if self.at(")"):
            self.advance()
            return params
        params.append(self.parse_parameter())
        while self.at(","):
            self.advance()
            if not self.at_ident():
                raise self.error("Expected argument after ','")
            params.append(self.parse_parameter())
        self.expect(")")
        return params

    def parse_parameter(self) -> ParameterSignature:
        label: str | None
        if self.at("_"):
            self.advance()
            label = None
            if self.at(":"):
                raise self.error("Expected argument name after '_'")
            name = self.expect_ident().value
            self.expect(":")
        else:
            label = self.expect_ident().value
            if self.at(":"):
                self.advance()
                name = label
            else:
                name = self.expect_ident().value
                self.expect(":")
        attributes = self.parse_parameter_attributes()
        typ = self.parse_type()
        if isinstance(typ, BlockType) and len(attributes) > 0:
            typ = typ.with_attributes(attributes)
        return ParameterSignature(label, name, typ)

    def parse_parameter_attributes(self) -> frozenset[BlockTypeAttribute]:
        """Attribute list of a parameter; `inout` ends the list."""
        attributes = self.parse_attribute_list()
        if self.at("inout"):
            self.advance()
        return attributes

    def parse_attribute_list(self) -> frozenset[BlockTypeAttribute]:
        attributes: set[BlockTypeAttribute] = set()
        while self.at("@"):
            self.advance()
            tok = self.expect_ident()
            if tok.value == "autoclosure":
                attributes.add(BlockTypeAttribute.AUTOCLOSURE)
            elif tok.value == "escaping":
                attributes.add(BlockTypeAttribute.ESCAPING)
            elif tok.value == "convention":
                self.expect("(")
                kind = self.expect_ident()
                self.expect(")")
                attr = CONVENTIONS.get(kind.value)
                if attr is not None:
                    attributes.add(attr)
            # Unknown attributes are accepted and dropped
        return frozenset(attributes)

    # ── Types ────────────────────────────────────────────────

    def parse_type(self) -> SwiftType:
        """Type = PostfixType ( '&' PostfixType )*"""
        first = self.parse_postfix_type()
        if not self.at("&"):
            return first
        types: list[SwiftType] = [first]
        while self.at("&"):
            self.advance()
            types.append(self.parse_postfix_type())
        return ProtocolCompositionType(tuple(types))

    def parse_postfix_type(self) -> SwiftType:
        typ = self.parse_primary_type()
        while True:
            if self.at("?"):
                self.advance()
                typ = OptionalType(typ)
            elif self.at("!"):
                self.advance()
                typ = ImplicitlyUnwrappedOptionalType(typ)
            elif self.at(".") and self.peek(1).value == "Type":
                self.advance()
                self.advance()
                typ = MetatypeType(typ)
            else:
                return typ

    def parse_primary_type(self) -> SwiftType:
        start = self.current().offset
        attributes = self.parse_attribute_list()
        tok = self.current()
        typ: SwiftType
        if self.at("("):
            typ = self.parse_parenthesized_type()
        elif self.at("["):
            typ = self.parse_collection_type()
        elif tok.type == TK_IDENT:
            typ = self.parse_nominal_type()
        else:
            raise self.error("expected type, got " + _describe(tok))
        if len(attributes) > 0:
            if not isinstance(typ, BlockType):
                raise SwiftSyntaxError("attributes are only allowed on function types", start)
            typ = typ.with_attributes(attributes)
        return typ

    def parse_parenthesized_type(self) -> SwiftType:
        """Tuple, parenthesized type, or function type."""
        self.expect("(")
        elements: list[SwiftType] = []
        if not self.at(")"):
            elements.append(self.parse_tuple_element())
            while self.at(","):
                self.advance()
                elements.append(self.parse_tuple_element())
        self.expect(")")
        throws = False
        if self.at("throws") or self.at("rethrows"):
            self.advance()
            throws = True
        if self.at("->"):
            self.advance()
            return_type = self.parse_type()
            return BlockType(return_type, tuple(elements))
        if throws:
            raise self.error("expected '->' after 'throws'")
        if len(elements) == 0:
            return VOID
        if len(elements) == 1:
            return elements[0]
        return TupleType(tuple(elements))

    def parse_tuple_element(self) -> SwiftType:
        # Element labels (`x: Int`, `_ x: Int`) are accepted and dropped
        if self.at_ident() and self.peek(1).value == ":":
            self.advance()
            self.advance()
        elif (
            self.at_ident()
            and self.peek(1).type == TK_IDENT
            and self.peek(2).value == ":"
        ):
            self.advance()
            self.advance()
            self.advance()
        if self.at("inout"):
            self.advance()
        return self.parse_type()

    def parse_collection_type(self) -> SwiftType:
        self.expect("[")
        key = self.parse_type()
        if self.at(":"):
            self.advance()
            value = self.parse_type()
            self.expect("]")
            return DictionaryType(key, value)
        self.expect("]")
        return ArrayType(key)

    def parse_nominal_type(self) -> SwiftType:
        name = self.expect_ident().value
        while (
            self.at(".")
            and self.peek(1).type == TK_IDENT
            and self.peek(1).value != "Type"
        ):
            self.advance()
            name += "." + self.advance().value
        if self.at("<"):
            self.advance()
            arguments: list[SwiftType] = [self.parse_type()]
            while self.at(","):
                self.advance()
                arguments.append(self.parse_type())
            self.expect(">")
            return GenericType(name, tuple(arguments))
        if name == "Void":
            return VOID
        return TypeName(name)


def _describe(tok: Token) -> str:
    if tok.type == TK_EOF:
        return "end of input"
    return "'" + tok.value + "'"

"""Pytest-based signature parser tests.

Each `.tests` file under 01_signatures/ is named after the entry point it
exercises. Expected output is either the canonical rendering of the parsed
value or `error: <message> at offset <n>`.
"""

from pathlib import Path

import pytest

from swiftrewriter.formatter import as_string_parameters, as_string_signature, stringify
from swiftrewriter.ir import (
    BlockType,
    BlockTypeAttribute,
    FunctionSignature,
    OptionalType,
    ParameterSignature,
    TypeName,
)
from swiftrewriter.parser import SwiftSyntaxError, parse_parameters, parse_signature, parse_type

SIGNATURES_DIR = Path(__file__).parent / "01_signatures"

ENTRY_POINTS = {
    "signatures": (parse_signature, lambda sig: as_string_signature(sig, include_name=True)),
    "parameters": (parse_parameters, as_string_parameters),
    "types": (parse_type, stringify),
}


def parse_test_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse .tests file into (name, input, expected) tuples."""
    lines = path.read_text().split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                input_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            expected_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                expected_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_signature_tests() -> list[tuple[str, str, str, str]]:
    """Find all signature tests, returns (test_id, input, expected, file_stem)."""
    results = []
    for test_file in sorted(SIGNATURES_DIR.glob("*.tests")):
        for name, text, expected in parse_test_file(test_file):
            test_id = f"{test_file.stem}/{name}"
            results.append((test_id, text, expected, test_file.stem))
    return results


def pytest_generate_tests(metafunc):
    """Parametrize tests over signature test files."""
    if "sig_input" in metafunc.fixturenames:
        params = [
            pytest.param(text, expected, stem, id=test_id)
            for test_id, text, expected, stem in discover_signature_tests()
        ]
        metafunc.parametrize("sig_input,sig_expected,sig_entry", params)


def test_signature_file(sig_input: str, sig_expected: str, sig_entry: str):
    parse, render = ENTRY_POINTS[sig_entry]
    if sig_expected.startswith("error:"):
        with pytest.raises(SwiftSyntaxError) as excinfo:
            parse(sig_input)
        assert str(excinfo.value) == sig_expected[6:].strip()
        return
    result = parse(sig_input)
    rendered = render(result)
    assert rendered == sig_expected
    # The canonical rendering parses back to the same value
    assert parse(rendered) == result


# ── Structure ────────────────────────────────────────────────


def test_single_identifier_is_label_and_name():
    sig = parse_signature("setValue(value: Int)")
    assert sig.parameters == (ParameterSignature("value", "value", TypeName("Int")),)


def test_underscore_means_no_label():
    sig = parse_signature("setName(_ v: String)")
    assert sig.parameters[0].label is None
    assert sig.parameters[0].name == "v"
    assert sig.selector.keywords == ("setName", None)


def test_signature_defaults():
    sig = parse_signature("foo()")
    assert sig == FunctionSignature("foo")
    assert not sig.is_static
    assert not sig.is_mutating


def test_mutating_flag():
    assert parse_signature("mutating reset()").is_mutating


def test_parameter_attributes_union_into_block_type():
    sig = parse_signature("run(_ block: @escaping @autoclosure @escaping () -> Void)")
    typ = sig.parameters[0].type
    assert isinstance(typ, BlockType)
    assert typ.attributes == frozenset(
        {BlockTypeAttribute.ESCAPING, BlockTypeAttribute.AUTOCLOSURE}
    )


def test_optional_block_parameter():
    (param,) = parse_parameters("(handler: ((Bool) -> Void)?)")
    assert param.type == OptionalType(BlockType(parse_type("Void"), (TypeName("Bool"),)))


def test_syntax_error_offset_is_within_input():
    text = "foo(x Int)"
    with pytest.raises(SwiftSyntaxError) as excinfo:
        parse_signature(text)
    assert 0 <= excinfo.value.offset <= len(text)
    assert excinfo.value.msg == "expected ':', got ')'"

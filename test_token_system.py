# test_token_system.py

import dataclasses
import typing

import pytest

from core import (
    Associativity, OperatorKind, OPERATOR_DEFINITIONS, ARITHMETIC_OPERATORS,
    Token, TokenType, classify, split_lexemes, tokenize
)


# ---------------------------
# Operator table
# ---------------------------

def test_precedence_table():
    assert OperatorKind.OPEN_BRACKET.precedence == 0
    assert OperatorKind.ADDITION.precedence == OperatorKind.SUBTRACTION.precedence == 1
    assert OperatorKind.MULTIPLY.precedence == OperatorKind.DIVIDE.precedence == 2
    assert OperatorKind.EXPONENT.precedence == 3


def test_only_exponent_is_right_associative():
    right = [kind for kind in ARITHMETIC_OPERATORS if kind.associativity == Associativity.RIGHT]
    assert right == [OperatorKind.EXPONENT]


def test_brackets_are_not_arithmetic():
    assert OperatorKind.OPEN_BRACKET not in ARITHMETIC_OPERATORS
    assert OperatorKind.CLOSE_BRACKET not in ARITHMETIC_OPERATORS
    assert len(ARITHMETIC_OPERATORS) == 5


def test_operator_properties_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        OPERATOR_DEFINITIONS[OperatorKind.ADDITION].precedence = 5


def test_symbol_matches_definition():
    for kind, props in OPERATOR_DEFINITIONS.items():
        assert kind.symbol == props.symbol == str(kind)


# ---------------------------
# classify
# ---------------------------

@pytest.mark.parametrize("symbol,kind", [
    ("+", OperatorKind.ADDITION),
    ("-", OperatorKind.SUBTRACTION),
    ("*", OperatorKind.MULTIPLY),
    ("/", OperatorKind.DIVIDE),
    ("^", OperatorKind.EXPONENT),
    ("(", OperatorKind.OPEN_BRACKET),
    (")", OperatorKind.CLOSE_BRACKET),
])
def test_classify_operator(symbol, kind):
    token = classify(symbol)
    assert token.type == TokenType.OPERATOR
    assert token.operator == kind


@pytest.mark.parametrize("lexeme,value", [
    ("0", 0),
    ("42", 42),
    ("-10", -10),
    ("007", 7),
    ("-0", 0),
    ("12345678901234567890", 12345678901234567890),
])
def test_classify_number(lexeme, value):
    token = classify(lexeme)
    assert token.type == TokenType.NUMBER
    assert token.value == value


@pytest.mark.parametrize("lexeme", ["sine", "", "--5", "+5", "1_000", "3.14", " 1", "2+3", "٣", "**"])
def test_classify_unknown(lexeme):
    token = classify(lexeme)
    assert token.type == TokenType.UNKNOWN
    assert token.text == lexeme


def test_bare_minus_is_operator_not_number():
    assert classify("-") == Token.from_operator(OperatorKind.SUBTRACTION)


def test_tokens_are_immutable_values():
    token = classify("5")
    assert token == classify("5")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = 6


def test_render_uses_decimal_value():
    assert classify("007").render() == "7"
    assert classify("^").render() == "^"


# ---------------------------
# split_lexemes / tokenize
# ---------------------------

def test_split_single_spaces():
    assert split_lexemes("2 + 3") == ["2", "+", "3"]


def test_split_repeated_spaces_gives_empty_lexeme():
    assert split_lexemes("2  + 3") == ["2", "", "+", "3"]


def test_split_empty_string():
    assert split_lexemes("") == []


def test_tokenize():
    types_ = [token.type for token in tokenize("( -2 + x )")]
    assert types_ == [
        TokenType.OPERATOR, TokenType.NUMBER, TokenType.OPERATOR, TokenType.UNKNOWN, TokenType.OPERATOR
    ]


def test_token_optional_fields():
    hints = typing.get_type_hints(Token)
    assert hints["value"] == typing.Optional[int]
    assert hints["operator"] == typing.Optional[OperatorKind]
    assert classify("5").operator is None
    assert classify("+").value is None
    assert classify("x").value is None and classify("x").operator is None

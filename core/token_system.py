"""core/token_system.py"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    NUMBER = "number"      # 整数字面量
    OPERATOR = "operator"  # 操作符和括号
    UNKNOWN = "unknown"    # 无法识别的词素


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorKind(Enum):
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXPONENT = "^"
    OPEN_BRACKET = "("
    CLOSE_BRACKET = ")"

    @property
    def symbol(self):
        return self.value

    @property
    def precedence(self):
        return OPERATOR_DEFINITIONS[self].precedence

    @property
    def associativity(self):
        return OPERATOR_DEFINITIONS[self].associativity

    @property
    def is_bracket(self):
        return self in (OperatorKind.OPEN_BRACKET, OperatorKind.CLOSE_BRACKET)

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class OperatorProperties:
    symbol: str
    precedence: int
    associativity: Associativity = Associativity.LEFT


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    # 左括号优先级最低，作为栈中的屏障
    OperatorKind.OPEN_BRACKET: OperatorProperties('(', 0),

    OperatorKind.ADDITION: OperatorProperties('+', 1),
    OperatorKind.SUBTRACTION: OperatorProperties('-', 1),
    OperatorKind.MULTIPLY: OperatorProperties('*', 2),
    OperatorKind.DIVIDE: OperatorProperties('/', 2),
    OperatorKind.EXPONENT: OperatorProperties('^', 3, Associativity.RIGHT),

    # 右括号从不入栈
    OperatorKind.CLOSE_BRACKET: OperatorProperties(')', 4),
}

SYMBOL_TO_OPERATOR = {props.symbol: kind for kind, props in OPERATOR_DEFINITIONS.items()}

ARITHMETIC_OPERATORS = frozenset(kind for kind in OperatorKind if not kind.is_bracket)

_INTEGER_PATTERN = re.compile(r'-?[0-9]+')


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    value: Optional[int] = None
    operator: Optional[OperatorKind] = None

    @classmethod
    def number(cls, text, value):
        return cls(TokenType.NUMBER, text, value=value)

    @classmethod
    def from_operator(cls, kind):
        return cls(TokenType.OPERATOR, kind.symbol, operator=kind)

    @classmethod
    def unknown(cls, text):
        return cls(TokenType.UNKNOWN, text)

    def render(self):
        """输出队列中的字符串形式"""
        if self.type == TokenType.NUMBER:
            return str(self.value)
        return self.text


def classify(lexeme):
    """
    将单个词素分类为 Token
    Args:
        lexeme: 以空格分隔出的单个词素
    Returns:
        Token：先匹配操作符，再匹配整数，否则为 UNKNOWN
    """
    kind = SYMBOL_TO_OPERATOR.get(lexeme)
    if kind is not None:
        return Token.from_operator(kind)

    # 只接受可选的负号加 ASCII 数字，int() 本身会接受 '+5'、'1_0' 和空白
    if _INTEGER_PATTERN.fullmatch(lexeme):
        return Token.number(lexeme, int(lexeme))

    return Token.unknown(lexeme)


def split_lexemes(expression, separator=' '):
    """按单个分隔符切分；连续空格会产生空词素，空字符串不产生任何词素"""
    if expression == '':
        return []
    return expression.split(separator)


def tokenize(expression, separator=' '):
    return [classify(lexeme) for lexeme in split_lexemes(expression, separator)]

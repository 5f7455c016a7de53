"""核心模块 - Token系统、调度场转换器、RPN评估器和操作符"""
from .errors import (
    ExpressionError, InvalidTokenError, MissingOperandError, DivisionByZeroError,
    InvalidExponentError, UnbalancedBracketsError, EmptyExpressionError,
    MalformedExpressionError, ResultTooLargeError
)
from .token_system import (
    TokenType, Token, Associativity, OperatorKind, OperatorProperties,
    OPERATOR_DEFINITIONS, SYMBOL_TO_OPERATOR, ARITHMETIC_OPERATORS,
    classify, split_lexemes, tokenize
)
from .operators import Operators
from .shunting_yard import ShuntingYardConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate

__all__ = [
    'ExpressionError', 'InvalidTokenError', 'MissingOperandError', 'DivisionByZeroError',
    'InvalidExponentError', 'UnbalancedBracketsError', 'EmptyExpressionError',
    'MalformedExpressionError', 'ResultTooLargeError',
    'TokenType', 'Token', 'Associativity', 'OperatorKind', 'OperatorProperties',
    'OPERATOR_DEFINITIONS', 'SYMBOL_TO_OPERATOR', 'ARITHMETIC_OPERATORS',
    'classify', 'split_lexemes', 'tokenize',
    'Operators', 'ShuntingYardConverter', 'to_postfix', 'RPNEvaluator', 'evaluate'
]

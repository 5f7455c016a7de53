"""core/errors.py - 表达式转换与求值的错误类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""
    pass


class InvalidTokenError(ExpressionError):
    """词素既不是整数也不是已知的操作符/括号"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid token! {token!r}")


class MissingOperandError(ExpressionError):
    """操作符求值时栈中不足两个操作数"""

    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Operand expected for operator '{operator}'")


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    def __init__(self):
        super().__init__("Division by zero")


class InvalidExponentError(ExpressionError):
    def __init__(self, exponent):
        self.exponent = exponent
        super().__init__(f"Negative exponent {exponent} is not supported")


class UnbalancedBracketsError(ExpressionError):
    """仅在 strict_brackets 模式下抛出"""
    pass


class EmptyExpressionError(ExpressionError):
    """仅在 allow_empty=False 时抛出"""

    def __init__(self):
        super().__init__("Empty expression")


class MalformedExpressionError(ExpressionError):
    """仅在 allow_partial=False 时抛出：求值结束后栈中剩余多个值"""

    def __init__(self, remaining):
        self.remaining = remaining
        super().__init__(f"Stack has {remaining} elements after evaluation, expected 1")


class ResultTooLargeError(ExpressionError, OverflowError):
    """乘法或乘方结果超过 EVALUATOR_CONFIG["max_result_bits"]"""

    def __init__(self, operator, max_bits):
        self.operator = operator
        self.max_bits = max_bits
        super().__init__(f"Result of '{operator}' exceeds {max_bits} bits")

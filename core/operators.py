"""core/operators.py"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import DivisionByZeroError, InvalidExponentError, ResultTooLargeError
from core.token_system import OperatorKind

logger = logging.getLogger(__name__)


class Operators:
    """所有二元整数操作符的静态方法集合"""

    @staticmethod
    def add(first, second):
        return first + second

    @staticmethod
    def sub(first, second):
        return first - second

    @staticmethod
    def mul(first, second):
        max_bits = EVALUATOR_CONFIG["max_result_bits"]
        if first.bit_length() + second.bit_length() > max_bits:
            raise ResultTooLargeError("*", max_bits)
        return first * second

    @staticmethod
    def div(first, second):
        """整数除法，向零截断（Python 的 // 向下取整，负数时结果不同）"""
        if second == 0:
            raise DivisionByZeroError()
        quotient = abs(first) // abs(second)
        return quotient if (first < 0) == (second < 0) else -quotient

    @staticmethod
    def pow(first, second):
        if second < 0:
            raise InvalidExponentError(second)
        # 底数为 -1、0、1 时结果不会增长
        if first in (-1, 0, 1):
            return first ** second
        max_bits = EVALUATOR_CONFIG["max_result_bits"]
        if first.bit_length() * second > max_bits:
            raise ResultTooLargeError("^", max_bits)
        return first ** second

    @staticmethod
    def apply(kind, first, second):
        """
        按操作符类型分派
        Args:
            kind: 算术 OperatorKind（括号不合法）
            first: 左操作数（先入栈）
            second: 右操作数（后入栈）
        """
        op_method = _DISPATCH.get(kind)
        if op_method is None:
            raise ValueError(f"Not an arithmetic operator: {kind}")
        result = op_method(first, second)
        logger.debug(f"{first} {kind.symbol} {second} = {result}")
        return result


_DISPATCH = {
    OperatorKind.ADDITION: Operators.add,
    OperatorKind.SUBTRACTION: Operators.sub,
    OperatorKind.MULTIPLY: Operators.mul,
    OperatorKind.DIVIDE: Operators.div,
    OperatorKind.EXPONENT: Operators.pow,
}

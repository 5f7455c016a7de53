"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import CONVERTER_CONFIG, EVALUATOR_CONFIG
from core.errors import (
    EmptyExpressionError, InvalidTokenError, MalformedExpressionError, MissingOperandError
)
from core.operators import Operators
from core.token_system import TokenType, classify, split_lexemes

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix, allow_partial=None, allow_empty=None):
        """
        评估RPN表达式
        Args:
            postfix: 以单个空格分隔的后缀表达式
            allow_partial: 是否允许部分表达式（栈中有多个元素时返回栈顶）
            allow_empty: 空表达式是否返回 EVALUATOR_CONFIG["empty_result"]
            两者为 None 时读取 EVALUATOR_CONFIG
        Returns:
            整数结果
        """
        if allow_partial is None:
            allow_partial = EVALUATOR_CONFIG["allow_partial"]
        if allow_empty is None:
            allow_empty = EVALUATOR_CONFIG["allow_empty"]

        stack = []

        for lexeme in split_lexemes(postfix, CONVERTER_CONFIG["separator"]):
            token = classify(lexeme)

            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            # 括号不是合法的后缀 token，与未知词素一样处理
            elif token.type == TokenType.OPERATOR and not token.operator.is_bracket:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.operator.symbol}")
                    raise MissingOperandError(token.operator.symbol)
                second = stack.pop()
                first = stack.pop()
                stack.append(Operators.apply(token.operator, first, second))

            else:
                raise InvalidTokenError(token.text)

        # 返回结果处理
        if len(stack) == 0:
            if not allow_empty:
                raise EmptyExpressionError()
            logger.debug("Empty stack after evaluation, returning default result")
            return EVALUATOR_CONFIG["empty_result"]

        if len(stack) > 1:
            if not allow_partial:
                logger.error(f"RPN expression: {postfix!r}")
                raise MalformedExpressionError(len(stack))
            logger.debug(f"Partial expression with {len(stack)} stack elements, returning top")

        return stack[-1]


def evaluate(postfix, allow_partial=None, allow_empty=None):
    return RPNEvaluator.evaluate(postfix, allow_partial=allow_partial, allow_empty=allow_empty)

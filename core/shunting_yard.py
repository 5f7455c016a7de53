"""中缀表达式 -> 后缀表达式（调度场算法）"""
import logging

from config.config import CONVERTER_CONFIG
from core.errors import InvalidTokenError, UnbalancedBracketsError
from core.token_system import Associativity, OperatorKind, TokenType, classify, split_lexemes

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """将中缀表达式转换为后缀表达式"""

    @staticmethod
    def to_postfix(expression, strict_brackets=None):
        """
        转换中缀表达式
        Args:
            expression: 以单个空格分隔的中缀表达式
            strict_brackets: 括号不匹配时是否抛错，None 表示读取 CONVERTER_CONFIG
        Returns:
            以单个空格连接的后缀表达式
        """
        if strict_brackets is None:
            strict_brackets = CONVERTER_CONFIG["strict_brackets"]
        separator = CONVERTER_CONFIG["separator"]

        out_queue = []
        stack = []

        for lexeme in split_lexemes(expression, separator):
            token = classify(lexeme)

            if token.type == TokenType.NUMBER:
                out_queue.append(token.render())
            elif token.type == TokenType.OPERATOR:
                if token.operator.is_bracket:
                    ShuntingYardConverter._handle_bracket(token.operator, stack, out_queue, strict_brackets)
                else:
                    ShuntingYardConverter._add_operator(token.operator, stack, out_queue)
            else:
                logger.debug(f"Invalid token {token.text!r} in expression {expression!r}")
                raise InvalidTokenError(token.text)

        while stack:
            op = stack.pop()
            if op == OperatorKind.OPEN_BRACKET:
                if strict_brackets:
                    raise UnbalancedBracketsError("Unmatched '(' in expression")
                logger.warning(f"Unmatched '(' in expression {expression!r}, emitted as-is")
            out_queue.append(op.symbol)

        postfix = separator.join(out_queue)
        logger.debug(f"Infix {expression!r} -> postfix {postfix!r}")
        return postfix

    @staticmethod
    def _handle_bracket(op, stack, out_queue, strict_brackets):
        if op == OperatorKind.OPEN_BRACKET:
            stack.append(op)
            return

        # 右括号：弹出直到遇到左括号（左括号丢弃）
        while stack:
            top_op = stack.pop()
            if top_op == OperatorKind.OPEN_BRACKET:
                return
            out_queue.append(top_op.symbol)

        if strict_brackets:
            raise UnbalancedBracketsError("Unmatched ')' in expression")
        logger.warning("Unmatched ')' ignored")

    @staticmethod
    def _add_operator(op, stack, out_queue):
        while stack and stack[-1] != OperatorKind.OPEN_BRACKET:
            top_op = stack[-1]
            if top_op.precedence > op.precedence or (
                    top_op.precedence == op.precedence and op.associativity == Associativity.LEFT):
                out_queue.append(stack.pop().symbol)
            else:
                break
        stack.append(op)


def to_postfix(expression, strict_brackets=None):
    return ShuntingYardConverter.to_postfix(expression, strict_brackets=strict_brackets)

"""主程序入口 - 中缀表达式转后缀并求值"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, BATCH_CONFIG, validate_config
from core import ExpressionError, to_postfix, evaluate
from data.data_loader import load_expressions, evaluate_expressions, save_results, summarize_results

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-yard infix to postfix converter and evaluator")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Infix equation, tokens separated by single spaces, e.g. \"( 2 + 3 ) * 4\""
    )
    parser.add_argument(
        "--postfix_only",
        action="store_true",
        help="Only print the postfix form, do not evaluate"
    )
    parser.add_argument(
        "--eval_postfix",
        action="store_true",
        help="Treat the expression as postfix and evaluate it directly"
    )
    parser.add_argument(
        "--strict_brackets",
        action="store_true",
        help="Fail on unbalanced brackets instead of ignoring them"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on empty expressions and on leftover operands"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="CSV file of infix expressions to evaluate in batch"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in the CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["output_path"],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def run_batch(args):
    dataset = load_expressions(args.input_path, args.expression_column)
    results = evaluate_expressions(
        dataset,
        expression_column=args.expression_column,
        strict_brackets=True if args.strict_brackets else None,
        allow_partial=False if args.strict else None,
        allow_empty=False if args.strict else None,
    )
    save_results(results, args.output_path)

    summary = summarize_results(results)
    print(f"Evaluated: {summary['total']}, succeeded: {summary['succeeded']}, failed: {summary['failed']}")
    return 0 if summary['failed'] == 0 else 1


def run_single(args):
    expression = args.expression.strip()
    allow_partial = False if args.strict else None
    allow_empty = False if args.strict else None

    if args.eval_postfix:
        result = evaluate(expression, allow_partial=allow_partial, allow_empty=allow_empty)
        print(f"Eval: {result}")
        return 0

    postfix = to_postfix(expression, strict_brackets=True if args.strict_brackets else None)
    print(f"Postfix: {postfix}")
    if args.postfix_only:
        return 0

    result = evaluate(postfix, allow_partial=allow_partial, allow_empty=allow_empty)
    print(f"Eval: {result}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOGGING_CONFIG["format"])
    validate_config()

    if args.input_path is None and (args.expression is None or not args.expression.strip()):
        print(f"Usage: {parser.prog} infix equation", file=sys.stderr)
        return 1

    try:
        if args.input_path is not None:
            return run_batch(args)
        return run_single(args)
    except ExpressionError as e:
        logger.debug(f"{type(e).__name__} raised", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Batch evaluation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""表达式数据加载和批量求值模块"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG
from core import EmptyExpressionError, ExpressionError, to_postfix, evaluate

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载表达式数据集

    Parameters:
    - file_path: CSV 文件路径
    - expression_column: 表达式列名，默认为 BATCH_CONFIG["expression_column"]

    Returns:
    - 去除空表达式后的 DataFrame（表达式列为 str）
    """
    expression_column = expression_column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    # 以 str 读取，避免 "42" 这样的单个数字被转换为 int
    dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)

    if expression_column not in dataset.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in dataset.")

    dataset[expression_column] = dataset[expression_column].str.strip().replace('', pd.NA)
    check_missing_values(dataset[[expression_column]], file_path)
    dataset = dataset.dropna(subset=[expression_column]).reset_index(drop=True)

    logger.info(f"Loaded {len(dataset)} expressions")
    return dataset


def check_missing_values(dataset, dataset_name):
    """
    检查数据集中的缺失值

    Parameters:
    - dataset: 要检查缺失值的DataFrame
    - dataset_name: 数据集名称（用于日志）
    """
    missing_values = dataset.isnull().sum()
    missing_columns = missing_values[missing_values > 0]

    if not missing_columns.empty:
        logger.warning(f'Missing values in {dataset_name} dataset:')
        logger.warning(missing_columns)
    else:
        logger.info(f'No missing values in {dataset_name} dataset.')


def _convert_and_evaluate(expression, strict_brackets, allow_partial, allow_empty):
    # 与命令行一致：去掉首尾空白，空白行视为空表达式错误
    expression = expression.strip()
    try:
        if not expression:
            raise EmptyExpressionError()
        postfix = to_postfix(expression, strict_brackets=strict_brackets)
        result = evaluate(postfix, allow_partial=allow_partial, allow_empty=allow_empty)
    except ExpressionError as e:
        logger.warning(f"Failed to evaluate expression {expression!r}: {e}")
        return None, None, f"{type(e).__name__}: {e}"
    return postfix, result, None


def evaluate_expressions(dataset, expression_column=None, strict_brackets=None,
                         allow_partial=None, allow_empty=None):
    """
    对每一行的中缀表达式做转换和求值，每行互不影响

    Returns:
    - 增加了 postfix / result / error 三列的新 DataFrame
    """
    expression_column = expression_column or BATCH_CONFIG["expression_column"]
    results = dataset.copy()

    rows = [
        _convert_and_evaluate(expression, strict_brackets, allow_partial, allow_empty)
        for expression in results[expression_column]
    ]
    # object 列：结果可能超出 int64 范围
    results['postfix'] = pd.Series([row[0] for row in rows], index=results.index, dtype=object)
    results['result'] = pd.Series([row[1] for row in rows], index=results.index, dtype=object)
    results['error'] = pd.Series([row[2] for row in rows], index=results.index, dtype=object)

    summary = summarize_results(results)
    logger.info(f"Evaluated {summary['total']} expressions: "
                f"{summary['succeeded']} succeeded, {summary['failed']} failed")
    return results


def summarize_results(results):
    failed = int(results['error'].notna().sum())
    return {
        'total': len(results),
        'succeeded': len(results) - failed,
        'failed': failed,
    }


def save_results(results, output_path=None):
    output_path = output_path or BATCH_CONFIG["output_path"]
    results.to_csv(output_path, index=False)
    logger.info(f"Results saved to {output_path}")
    return output_path

"""配置文件"""
import logging

# 中缀 -> 后缀转换参数
CONVERTER_CONFIG = {
    "strict_brackets": False,  # False: 括号不匹配时宽松处理并记录警告；True: 抛出 UnbalancedBracketsError
    "separator": " ",          # 词素分隔符，只支持单个空格
}

# 后缀表达式求值参数
EVALUATOR_CONFIG = {
    "allow_partial": True,  # 栈中剩余多个值时返回栈顶
    "allow_empty": True,    # 空表达式返回 empty_result
    "empty_result": 0,
    "max_result_bits": 8192,  # 乘法和乘方结果的位数上限，保持在 int 转 str 的默认位数限制以内
}

# 批量处理参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "output_path": "expression_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CONVERTER_CONFIG["separator"] == " ", "词素只按单个空格切分"
    assert isinstance(CONVERTER_CONFIG["strict_brackets"], bool)
    assert isinstance(EVALUATOR_CONFIG["empty_result"], int), "空表达式的默认值必须是整数"
    assert EVALUATOR_CONFIG["max_result_bits"] > 0
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"Unknown logging level {LOGGING_CONFIG['level']}"
    logging.getLogger(__name__).debug("Configuration validated successfully!")

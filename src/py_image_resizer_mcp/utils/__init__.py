"""工具模块包。

提供纯工具函数，不包含业务逻辑。
"""

# 从日志工具模块导入
from .logging_helpers import get_logger, setup_logging

# 从消息格式化模块导入
from .message_formatter import MessageFormatter

# 从命名助手模块导入
from .naming_helpers import RecordIdSequence

# 从大小格式化模块导入
from .size_helpers import format_size, percentage


__all__ = [
    "MessageFormatter",
    "RecordIdSequence",
    "format_size",
    "get_logger",
    "percentage",
    "setup_logging",
]

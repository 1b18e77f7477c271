"""消息格式化工具模块。

提供统一的错误消息、日志消息格式化功能。
"""

from pathlib import Path
from typing import Any


class MessageFormatter:
    """统一的消息格式化器"""

    @staticmethod
    def not_an_image(name: str, mime_type: str) -> str:
        """非图像文件跳过消息"""
        return f"跳过非图像文件: {name} ({mime_type})"

    @staticmethod
    def record_not_found(record_id: str) -> str:
        """记录不存在消息"""
        return f"记录不存在: {record_id}"

    @staticmethod
    def duplicate_record(record_id: str) -> str:
        """记录标识重复消息"""
        return f"记录标识重复: {record_id}"

    @staticmethod
    def operation_failed(
        operation: str, target: str | Path, error: Exception | None = None
    ) -> str:
        """操作失败消息"""
        msg = f"{operation}失败: {target}"
        if error:
            msg += f" - {error}"
        return msg

    @staticmethod
    def validation_error(field: str, value: Any, reason: str | None = None) -> str:
        """参数验证错误消息"""
        msg = f"参数验证失败 - {field}: {value}"
        if reason:
            msg += f" ({reason})"
        return msg

    @staticmethod
    def format_error(operation: str, target: str | Path, error: Exception) -> str:
        """格式化通用错误消息"""
        return f"{operation}失败 [{target}]: {error}"

    @staticmethod
    def batch_finished(succeeded: int, skipped: int, failed: int) -> str:
        """批次完成消息"""
        return f"批次处理完成: 成功 {succeeded}, 跳过 {skipped}, 失败 {failed}"

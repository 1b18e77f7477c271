"""图像缩放异常处理模块。

定义统一的异常类和错误处理机制，包含图像编解码异常转换装饰器。
"""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from PIL.Image import DecompressionBombError, UnidentifiedImageError

from .models.records import FailedItem
from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter


logger = get_logger()
T = TypeVar("T")


# 统一的异常类型
class ResizerError(Exception):
    """缩放相关错误基类"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.message = message
        self.name = name


class ValidationError(ResizerError):
    """参数验证错误"""

    pass


class UnsupportedInputError(ResizerError):
    """声明类型不是图像"""

    pass


class TransformError(ResizerError):
    """图像解码或编码失败"""

    pass


class NotFoundError(ResizerError):
    """工作集中不存在指定记录（仅内部使用）"""

    pass


def handle_image_errors(operation_name: str = "图像缩放"):
    """将 Pillow 与系统异常统一转换为 TransformError

    Args:
        operation_name: 操作名称，用于日志记录
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except TransformError:
                raise
            except UnidentifiedImageError as e:
                logger.debug(f"{operation_name} - 无法识别图像格式: {e}")
                raise TransformError(f"无法识别的图像数据: {e}") from e
            except DecompressionBombError as e:
                logger.debug(f"{operation_name} - 图像过大: {e}")
                raise TransformError(f"图像像素过多，可能存在安全风险: {e}") from e
            except OSError as e:
                logger.debug(f"{operation_name} - 编解码失败: {e}")
                raise TransformError(f"图像编解码失败: {e}") from e
            except (ValueError, TypeError) as e:
                logger.debug(f"{operation_name} - 参数错误: {e}")
                raise TransformError(f"编码参数被拒绝: {e}") from e

        return wrapper

    return decorator


class ErrorHandler:
    """统一错误处理器

    提供标准化的错误日志记录，并把单文件失败转换为批次结果中的条目。
    """

    @staticmethod
    def log_error(
        operation: str, target: str, error: Exception, level: str = "error"
    ) -> None:
        """标准化的错误日志记录

        Args:
            operation: 操作名称（如"图像缩放"）
            target: 相关文件名或记录标识
            error: 异常对象
            level: 日志级别 ("error", "warning", "debug")
        """
        log_msg = MessageFormatter.format_error(operation, target, error)
        getattr(logger, level, logger.error)(log_msg)

    @staticmethod
    def failed_item(
        error: Exception,
        name: str,
        operation: str = "图像缩放",
        position: int | None = None,
    ) -> FailedItem:
        """记录单文件失败并生成批次失败条目，按异常类型决定日志级别"""
        match error:
            case TransformError() as te:
                ErrorHandler.log_error(operation, name, te, "warning")
                message = te.message
            case _:
                ErrorHandler.log_error(f"{operation} - 未知错误", name, error, "error")
                message = f"{operation}: {error}"
        return FailedItem(name=name, error=message, position=position)

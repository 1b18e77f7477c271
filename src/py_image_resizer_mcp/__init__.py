"""Python 图像批量缩放库。

基于 Pillow 的批量缩放与压缩，并维护与工作集严格一致的统计数据。
"""

__version__ = "0.1.0"
__author__ = "crper"
__description__ = "图像批量缩放库，基于 Pillow 11"

# 核心功能导出
from .exceptions import (
    NotFoundError,
    ResizerError,
    TransformError,
    UnsupportedInputError,
    ValidationError,
)
from .models import (
    AggregateStats,
    BatchOutcome,
    InputFile,
    ProcessedImageRecord,
    TransformConfig,
)
from .resizer import ImageResizer


__all__ = [
    "AggregateStats",
    "BatchOutcome",
    "ImageResizer",
    "InputFile",
    "NotFoundError",
    "ProcessedImageRecord",
    "ResizerError",
    "TransformConfig",
    "TransformError",
    "UnsupportedInputError",
    "ValidationError",
    "__version__",
]

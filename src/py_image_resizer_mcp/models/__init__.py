"""数据模型包。

定义图片缩放相关的数据结构和模型。
"""

from .constants import ImageFormats, get_mime_type, is_image_mime
from .records import (
    AggregateStats,
    BatchOutcome,
    EncodedImage,
    FailedItem,
    InputFile,
    ProcessedImageRecord,
    StatsDelta,
)
from .transform_config import TransformConfig


__all__ = [
    "AggregateStats",
    "BatchOutcome",
    "EncodedImage",
    "FailedItem",
    "ImageFormats",
    "InputFile",
    "ProcessedImageRecord",
    "StatsDelta",
    "TransformConfig",
    "get_mime_type",
    "is_image_mime",
]

"""核心模块包。

单张图片的缩放、格式准备与编码。
"""

from .formats import FormatProcessor, get_save_parameters
from .transformer import ImageTransformer, fit_dimensions


__all__ = [
    "FormatProcessor",
    "ImageTransformer",
    "fit_dimensions",
    "get_save_parameters",
]

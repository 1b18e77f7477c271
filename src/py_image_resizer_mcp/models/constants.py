"""图像处理相关常量定义。

基于 Pillow 动态能力的图像格式与 MIME 类型管理。
"""

from pathlib import Path
from typing import Final

from PIL import Image


class ImageFormats:
    """基于 Pillow 的动态图像格式管理"""

    # 只定义必要的别名映射（用户友好的别名）
    ALIASES: Final[dict[str, str]] = {
        "JPG": "JPEG",
    }

    # 只定义 Pillow 未提供的特殊 MIME 类型
    SPECIAL_MIME_TYPES: Final[dict[str, str]] = {
        "ICO": "image/x-icon",
        "PPM": "image/x-portable-pixmap",
        "PGM": "image/x-portable-graymap",
        "PBM": "image/x-portable-bitmap",
    }

    # 允许的输出编码
    OUTPUT_FORMATS: Final[tuple[str, ...]] = ("JPEG", "PNG", "WEBP")

    # 非图像文件的兜底 MIME 类型
    FALLBACK_MIME_TYPE: Final[str] = "application/octet-stream"

    @classmethod
    def normalize(cls, format_name: str) -> str:
        """标准化格式名称（大写并解析别名）"""
        format_upper = format_name.upper()
        return cls.ALIASES.get(format_upper, format_upper)

    @classmethod
    def get_mime_type(cls, format_name: str) -> str:
        """获取格式对应的 MIME 类型"""
        format_upper = cls.normalize(format_name)

        if format_upper in cls.SPECIAL_MIME_TYPES:
            return cls.SPECIAL_MIME_TYPES[format_upper]

        # MIME 表由插件注册，先确保插件已加载
        Image.init()
        if mime := Image.MIME.get(format_upper):
            return mime

        return f"image/{format_upper.lower()}"

    @classmethod
    def guess_mime_type(cls, path: str | Path) -> str:
        """根据扩展名推断 MIME 类型，Pillow 不认识的扩展名视为非图像"""
        suffix = Path(path).suffix.lower()
        format_name = Image.registered_extensions().get(suffix)
        if not format_name:
            return cls.FALLBACK_MIME_TYPE
        return cls.get_mime_type(format_name)


def get_mime_type(format_name: str) -> str:
    """便捷函数：获取 MIME 类型"""
    return ImageFormats.get_mime_type(format_name)


def is_image_mime(mime_type: str | None) -> bool:
    """判断声明的 MIME 类型是否为图像"""
    return bool(mime_type) and mime_type.lower().startswith("image/")

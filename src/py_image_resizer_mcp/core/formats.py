"""格式处理器模块。

为目标编码准备色彩模式，并生成对应的保存参数。
"""

from typing import Any

from PIL import Image

from ..utils.logging_helpers import get_logger


logger = get_logger()

# JPEG 无透明度，透明区域合成到白色背景
JPEG_BACKGROUND: tuple[int, int, int] = (255, 255, 255)


class FormatProcessor:
    """格式处理器"""

    def prepare_for_format(self, img: Image.Image, target_format: str) -> Image.Image:
        """为目标格式准备图片

        Args:
            img: PIL图片对象
            target_format: 目标格式

        Returns:
            Image.Image: 处理后的图片对象
        """
        match target_format:
            case "JPEG":
                return self._prepare_for_jpeg(img)
            case "PNG":
                return self._prepare_for_png(img)
            case "WEBP":
                return self._prepare_for_webp(img)
            case _:
                return img

    def _prepare_for_jpeg(self, img: Image.Image) -> Image.Image:
        """JPEG 不支持透明度，需要转换为 RGB"""
        if img.mode == "P":
            if "transparency" not in img.info:
                return img.convert("RGB")
            img = img.convert("RGBA")

        if img.mode in ("RGBA", "LA", "PA"):
            img = img.convert("RGBA")
            background = Image.new("RGB", img.size, JPEG_BACKGROUND)
            background.paste(img, mask=img.split()[-1])
            return background

        if img.mode != "RGB":
            # CMYK、灰度、二值等模式统一转 RGB
            return img.convert("RGB")

        return img

    def _prepare_for_png(self, img: Image.Image) -> Image.Image:
        if img.mode in ("RGB", "RGBA", "L", "LA", "P", "1"):
            return img
        return img.convert("RGBA" if "A" in img.mode else "RGB")

    def _prepare_for_webp(self, img: Image.Image) -> Image.Image:
        if img.mode in ("RGB", "RGBA"):
            return img
        if img.mode == "P" and "transparency" in img.info:
            return img.convert("RGBA")
        return img.convert("RGBA" if "A" in img.mode else "RGB")


def get_save_parameters(format_name: str, quality: int) -> dict[str, Any]:
    """获取保存参数

    Args:
        format_name: 输出格式
        quality: 编码质量 1-100

    Returns:
        dict: 传给 Image.save 的参数（包含 format）
    """
    params: dict[str, Any] = {"format": format_name}

    match format_name:
        case "JPEG":
            params.update(
                {
                    "quality": quality,
                    "optimize": True,
                    # 4:2:0 标准子采样
                    "subsampling": 2 if quality < 85 else 1,
                }
            )
        case "PNG":
            # PNG 无损，不使用 quality
            params.update({"optimize": True})
        case "WEBP":
            params.update({"quality": quality, "method": 6})
        case _:
            logger.warning(f"未知输出格式 {format_name}，使用默认保存参数")

    return params

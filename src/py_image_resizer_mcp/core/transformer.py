"""图像缩放器模块。

把单张图片按固定配置缩放到尺寸上限以内并重新编码。
"""

import asyncio
from io import BytesIO

from PIL import Image

from ..exceptions import TransformError, handle_image_errors
from ..models.records import EncodedImage, InputFile
from ..models.transform_config import TransformConfig
from ..utils.logging_helpers import get_logger
from .formats import FormatProcessor, get_save_parameters


logger = get_logger()


def fit_dimensions(
    size: tuple[int, int], max_width: int, max_height: int
) -> tuple[int, int]:
    """计算保持宽高比且不超过上限的尺寸

    已在上限以内的图片保持原尺寸，不做放大。
    """
    width, height = size
    if width <= max_width and height <= max_height:
        return width, height

    ratio = min(max_width / width, max_height / height)
    new_width = min(max_width, max(1, round(width * ratio)))
    new_height = min(max_height, max(1, round(height * ratio)))
    return new_width, new_height


class ImageTransformer:
    """单张图片缩放与重新编码"""

    def __init__(self, config: TransformConfig | None = None) -> None:
        self.config = config or TransformConfig()
        self.format_processor = FormatProcessor()

    async def transform(self, file: InputFile) -> EncodedImage:
        """异步缩放单个文件，编解码在工作线程中执行

        Raises:
            TransformError: 数据无法解码或编码参数被拒绝
        """
        return await asyncio.to_thread(self.transform_bytes, file.data, name=file.name)

    @handle_image_errors("图像缩放")
    def transform_bytes(self, data: bytes, *, name: str = "<memory>") -> EncodedImage:
        """同步缩放图像数据

        Args:
            data: 原始图像字节
            name: 文件名，仅用于日志

        Returns:
            EncodedImage: 编码结果
        """
        if not data:
            raise TransformError("空文件无法解码", name=name)

        with Image.open(BytesIO(data)) as source:
            source.load()
            original_dimensions = source.size
            img = self._rotate(source)

            target_size = fit_dimensions(
                img.size, self.config.max_width, self.config.max_height
            )
            if target_size != img.size:
                img = img.resize(target_size, Image.Resampling.LANCZOS)

            img = self.format_processor.prepare_for_format(
                img, self.config.output_format
            )

            buffer = BytesIO()
            img.save(
                buffer,
                **get_save_parameters(self.config.output_format, self.config.quality),
            )
            final_size = img.size

        encoded = buffer.getvalue()
        logger.debug(
            f"{name}: {original_dimensions} → {final_size}, {len(data)} → {len(encoded)} bytes"
        )
        return EncodedImage(
            data=encoded,
            mime_type=self.config.mime_type,
            width=final_size[0],
            height=final_size[1],
            original_dimensions=original_dimensions,
        )

    def _rotate(self, img: Image.Image) -> Image.Image:
        """按配置顺时针旋转"""
        if not self.config.rotation:
            return img
        # Pillow 的 rotate 为逆时针方向
        return img.rotate(-self.config.rotation, expand=True)

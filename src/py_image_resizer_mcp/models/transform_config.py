"""缩放配置模型。

定义单张图片缩放与重新编码的固定参数。
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import AppConfig, get_config
from .constants import ImageFormats


class TransformConfig(BaseModel):
    """缩放配置，创建后不可修改"""

    model_config = ConfigDict(frozen=True)

    max_width: int = Field(800, gt=0, le=50000, description="最大宽度")
    max_height: int = Field(800, gt=0, le=50000, description="最大高度")
    output_format: str = Field("JPEG", description="输出格式")
    quality: int = Field(80, ge=1, le=100, description="编码质量")
    rotation: int = Field(0, description="顺时针旋转角度")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        standard_format = ImageFormats.normalize(v)
        if standard_format not in ImageFormats.OUTPUT_FORMATS:
            raise ValueError(
                f"不支持的输出格式: {v}，"
                f"支持的格式: {', '.join(ImageFormats.OUTPUT_FORMATS)}"
            )
        return standard_format

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        if v % 90 != 0:
            raise ValueError(f"旋转角度必须是 90 的倍数，得到: {v}")
        return v % 360

    @property
    def mime_type(self) -> str:
        """输出编码对应的 MIME 类型"""
        return ImageFormats.get_mime_type(self.output_format)

    @property
    def bounds(self) -> tuple[int, int]:
        """尺寸上限 (宽, 高)"""
        return self.max_width, self.max_height

    @classmethod
    def from_app_config(cls, app_config: AppConfig | None = None) -> "TransformConfig":
        """从全局配置构建（支持环境变量覆盖）"""
        defaults = (app_config or get_config()).resize
        return cls(
            max_width=defaults.MAX_WIDTH,
            max_height=defaults.MAX_HEIGHT,
            output_format=defaults.OUTPUT_FORMAT,
            quality=defaults.QUALITY,
            rotation=defaults.ROTATION,
        )

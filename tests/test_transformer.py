"""缩放器测试。

测试单张图片的缩放、编码与错误转换。
"""

from io import BytesIO

import pytest
from PIL import Image
from pydantic import ValidationError as PydanticValidationError

from py_image_resizer_mcp.core.transformer import ImageTransformer, fit_dimensions
from py_image_resizer_mcp.exceptions import TransformError
from py_image_resizer_mcp.models import InputFile, TransformConfig


class TestFitDimensions:
    """尺寸计算测试"""

    def test_landscape_scaled_to_width(self):
        assert fit_dimensions((1600, 1000), 800, 800) == (800, 500)

    def test_portrait_scaled_to_height(self):
        assert fit_dimensions((600, 2400), 800, 800) == (200, 800)

    def test_small_image_passes_through(self):
        """上限以内不放大"""
        assert fit_dimensions((120, 90), 800, 800) == (120, 90)

    def test_exact_bounds_unchanged(self):
        assert fit_dimensions((800, 800), 800, 800) == (800, 800)

    def test_extreme_ratio_keeps_one_pixel(self):
        assert fit_dimensions((10000, 1), 800, 800) == (800, 1)


class TestImageTransformer:
    """缩放器测试"""

    @pytest.fixture
    def transformer(self):
        return ImageTransformer()

    def test_large_image_within_bounds(self, transformer, large_image: InputFile):
        """超出上限的图片缩放到 800x800 以内并保持宽高比"""
        encoded = transformer.transform_bytes(large_image.data, name=large_image.name)

        assert encoded.width <= 800
        assert encoded.height <= 800
        assert encoded.original_dimensions == (1600, 1000)
        assert abs(encoded.width / encoded.height - 1600 / 1000) < 0.01
        assert encoded.was_resized

        with Image.open(BytesIO(encoded.data)) as img:
            assert img.format == "JPEG"
            assert img.size == (encoded.width, encoded.height)

    def test_derived_size_is_exact_byte_length(
        self, transformer, large_image: InputFile
    ):
        encoded = transformer.transform_bytes(large_image.data)
        assert encoded.size == len(encoded.data)
        assert encoded.mime_type == "image/jpeg"

    def test_small_image_not_upscaled(self, transformer, small_image: InputFile):
        encoded = transformer.transform_bytes(small_image.data)

        assert (encoded.width, encoded.height) == (120, 90)
        assert not encoded.was_resized

    def test_transparent_image_flattened_for_jpeg(
        self, transformer, transparent_image: InputFile
    ):
        encoded = transformer.transform_bytes(transparent_image.data)

        with Image.open(BytesIO(encoded.data)) as img:
            assert img.mode == "RGB"

    def test_rotation_applied_before_fit(self, large_image: InputFile):
        transformer = ImageTransformer(TransformConfig(rotation=90))
        encoded = transformer.transform_bytes(large_image.data)

        assert (encoded.width, encoded.height) == (500, 800)

    def test_png_output(self, transparent_image: InputFile):
        transformer = ImageTransformer(TransformConfig(output_format="png"))
        encoded = transformer.transform_bytes(transparent_image.data)

        assert encoded.mime_type == "image/png"
        with Image.open(BytesIO(encoded.data)) as img:
            assert img.format == "PNG"
            assert img.mode == "RGBA"

    def test_undecodable_data_raises_transform_error(
        self, transformer, corrupt_image: InputFile
    ):
        with pytest.raises(TransformError):
            transformer.transform_bytes(corrupt_image.data)

    def test_empty_data_raises_transform_error(self, transformer):
        with pytest.raises(TransformError):
            transformer.transform_bytes(b"")

    @pytest.mark.asyncio
    async def test_async_transform(self, transformer, tall_image: InputFile):
        encoded = await transformer.transform(tall_image)

        assert (encoded.width, encoded.height) == (200, 800)


class TestTransformConfig:
    """缩放配置测试"""

    def test_defaults(self):
        config = TransformConfig()

        assert config.bounds == (800, 800)
        assert config.output_format == "JPEG"
        assert config.quality == 80
        assert config.rotation == 0

    def test_format_alias_normalized(self):
        assert TransformConfig(output_format="jpg").output_format == "JPEG"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"quality": 0},
            {"quality": 101},
            {"output_format": "BMP"},
            {"rotation": 45},
            {"max_width": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(PydanticValidationError):
            TransformConfig(**overrides)

    def test_config_is_frozen(self):
        config = TransformConfig()
        with pytest.raises(PydanticValidationError):
            config.quality = 50

    def test_from_app_config_reads_environment(self, monkeypatch):
        from py_image_resizer_mcp.config import AppConfig

        monkeypatch.setenv("PIR_MAX_WIDTH", "640")
        monkeypatch.setenv("PIR_QUALITY", "70")

        config = TransformConfig.from_app_config(AppConfig())

        assert config.max_width == 640
        assert config.max_height == 800
        assert config.quality == 70

"""测试配置文件。

提供测试所需的fixtures和内存中生成的测试图片。
"""

from io import BytesIO

import pytest
from PIL import Image, ImageDraw

from py_image_resizer_mcp.models import InputFile, ProcessedImageRecord


def make_image_bytes(
    size: tuple[int, int], format: str = "PNG", mode: str = "RGB"
) -> bytes:
    """生成带图案的测试图片"""
    color = (0, 0, 0, 0) if mode == "RGBA" else "white"
    img = Image.new(mode, size, color=color)
    draw = ImageDraw.Draw(img)
    width, height = size
    for i in range(30):
        x, y = (i * 37) % width, (i * 23) % height
        fill = (i * 5 % 256, i * 7 % 256, i * 11 % 256)
        if mode == "RGBA":
            fill = (*fill, 180)
        draw.rectangle([x, y, x + width // 8, y + height // 8], fill=fill)

    buffer = BytesIO()
    img.save(buffer, format)
    return buffer.getvalue()


def make_input(
    name: str,
    size: tuple[int, int] = (1000, 800),
    format: str = "PNG",
    mode: str = "RGB",
) -> InputFile:
    """生成图片输入文件"""
    return InputFile(
        name=name,
        mime_type=f"image/{format.lower()}",
        data=make_image_bytes(size, format, mode),
    )


def make_record(record_id: str, original_size: int, derived_size: int) -> ProcessedImageRecord:
    """直接构造记录，不经过编码"""
    return ProcessedImageRecord(
        id=record_id,
        name=f"{record_id}.jpg",
        original_size=original_size,
        derived_size=derived_size,
        payload=b"\xff\xd8\xff",
        mime_type="image/jpeg",
        width=10,
        height=10,
    )


@pytest.fixture
def large_image() -> InputFile:
    """超出尺寸上限的横向图片"""
    return make_input("large.png", (1600, 1000))


@pytest.fixture
def tall_image() -> InputFile:
    """超出尺寸上限的纵向图片"""
    return make_input("tall.jpg", (600, 2400), format="JPEG")


@pytest.fixture
def small_image() -> InputFile:
    """尺寸上限以内的图片"""
    return make_input("small.png", (120, 90))


@pytest.fixture
def transparent_image() -> InputFile:
    """带透明通道的图片"""
    return make_input("transparent.png", (400, 400), mode="RGBA")


@pytest.fixture
def text_file() -> InputFile:
    """非图像文件"""
    return InputFile(name="notes.txt", mime_type="text/plain", data=b"hello")


@pytest.fixture
def corrupt_image() -> InputFile:
    """声明为图像但内容无法解码"""
    return InputFile(name="broken.jpg", mime_type="image/jpeg", data=b"not an image")

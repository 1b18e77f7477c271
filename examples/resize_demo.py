#!/usr/bin/env python3
"""图像批量缩放演示脚本。

展示 py_image_resizer_mcp 库的核心功能，包括：
- 批量上传（非图像文件跳过、损坏文件容错）
- 统计数据的增量维护
- 移除单张图片与清空工作集
"""

import asyncio
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw

from py_image_resizer_mcp import ImageResizer, InputFile
from py_image_resizer_mcp.utils import format_size, setup_logging


def get_sample_images() -> list[Path]:
    """获取 public/images 中的素材图片"""
    project_root = Path(__file__).parent.parent
    images_dir = project_root / "public" / "images"

    if not images_dir.exists():
        print("⚠️ public/images 目录不存在，将使用生成的测试图像")
        return []

    image_files = sorted(
        f
        for f in images_dir.glob("*")
        if f.suffix.lower() in {".jpg", ".jpeg", ".png", ".webp"}
    )
    print(f"📁 找到 {len(image_files)} 张素材图片")
    return image_files


def generate_image(name: str, size: tuple[int, int]) -> InputFile:
    """生成带渐变条纹的 PNG 测试图片"""
    img = Image.new("RGB", size, color="white")
    draw = ImageDraw.Draw(img)
    for x in range(0, size[0], 8):
        draw.line([(x, 0), (x, size[1])], fill=(x % 256, (x * 3) % 256, 120), width=4)

    buffer = BytesIO()
    img.save(buffer, "PNG")
    return InputFile(name=name, mime_type="image/png", data=buffer.getvalue())


def build_batch() -> list[InputFile]:
    """组装演示批次：素材图片优先，否则使用生成图片"""
    files = [InputFile.from_path(p) for p in get_sample_images()]
    if not files:
        files = [
            generate_image("landscape.png", (2400, 1600)),
            generate_image("portrait.png", (900, 2000)),
            generate_image("thumbnail.png", (200, 150)),
        ]

    # 混入一个非图像文件和一个损坏的图像
    files.append(InputFile(name="notes.txt", mime_type="text/plain", data=b"hello"))
    files.append(InputFile(name="broken.jpg", mime_type="image/jpeg", data=b"\x00" * 64))
    return files


async def demo_batch_upload(resizer: ImageResizer) -> None:
    """批量上传演示"""
    print("=== 批量上传演示 ===")

    outcome = await resizer.upload(build_batch())

    for record in outcome.records:
        print(f"  {record.id} {record.get_summary()} [{record.width}x{record.height}]")
    print(f"跳过: {outcome.skipped}")
    print(f"失败: {[item.name for item in outcome.failed]}")
    print(f"批次: {outcome.get_summary()}")
    print(f"统计: {resizer.summary()}")


def demo_remove_and_clear(resizer: ImageResizer) -> None:
    """移除与清空演示"""
    print("\n=== 移除与清空演示 ===")

    if resizer.records:
        first = resizer.records[0]
        resizer.remove(first.id)
        print(f"移除 {first.name}，剩余原始大小 {format_size(resizer.stats.total_original_bytes)}")

    resizer.remove("img-999999")
    print(f"移除不存在的标识后: {resizer.summary()}")

    resizer.clear_all()
    print(f"清空后: {resizer.summary()}")


async def main():
    """主函数"""
    setup_logging("WARNING")
    print("🖼️  图像批量缩放演示")
    print("=" * 50)

    resizer = ImageResizer()
    await demo_batch_upload(resizer)
    demo_remove_and_clear(resizer)

    print("\n✅ 所有演示完成！")


if __name__ == "__main__":
    asyncio.run(main())

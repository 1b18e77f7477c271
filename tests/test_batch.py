"""批量处理测试。

测试批次过滤、部分失败容错以及结果顺序。
"""

import pytest

from py_image_resizer_mcp.core.transformer import ImageTransformer
from py_image_resizer_mcp.engine.batch import BatchProcessor
from py_image_resizer_mcp.exceptions import TransformError
from py_image_resizer_mcp.models import InputFile
from tests.conftest import make_input


class RecordingTransformer(ImageTransformer):
    """记录调用顺序，并让指定文件失败"""

    def __init__(self, fail_names: set[str] | None = None):
        super().__init__()
        self.fail_names = fail_names or set()
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0

    async def transform(self, file: InputFile):
        self.calls.append(file.name)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if file.name in self.fail_names:
                raise TransformError("编码失败", name=file.name)
            return await super().transform(file)
        finally:
            self.active -= 1


@pytest.mark.asyncio
class TestBatchProcessor:
    """批量处理器测试"""

    async def test_non_image_skipped(self, text_file, large_image):
        """一个非图像文件加一个有效文件，只产生一条记录"""
        outcome = await BatchProcessor().process([text_file, large_image])

        assert [r.name for r in outcome.records] == ["large.png"]
        assert outcome.skipped == ["notes.txt"]
        assert outcome.failed == []
        assert outcome.total_original_size == large_image.size

    async def test_failure_does_not_abort_batch(self, corrupt_image, large_image):
        """一个失败文件加一个成功文件，只保留成功记录"""
        outcome = await BatchProcessor().process([corrupt_image, large_image])

        assert [r.name for r in outcome.records] == ["large.png"]
        assert [item.name for item in outcome.failed] == ["broken.jpg"]
        assert outcome.skipped == []
        assert outcome.total_original_size == large_image.size
        assert outcome.total_derived_size == outcome.records[0].derived_size

    async def test_order_preserved_among_successes(self):
        files = [make_input(f"{i}.png", (300 + i * 10, 200)) for i in range(5)]
        transformer = RecordingTransformer(fail_names={"1.png", "3.png"})

        outcome = await BatchProcessor(transformer).process(files)

        assert transformer.calls == [f.name for f in files]
        assert [r.name for r in outcome.records] == ["0.png", "2.png", "4.png"]
        assert [item.name for item in outcome.failed] == ["1.png", "3.png"]
        assert [item.position for item in outcome.failed] == [1, 3]

    async def test_files_processed_one_at_a_time(self):
        files = [make_input(f"{i}.png", (200, 200)) for i in range(4)]
        transformer = RecordingTransformer()

        await BatchProcessor(transformer).process(files)

        assert transformer.max_active == 1

    async def test_ids_follow_input_order(self):
        files = [make_input(f"{i}.png", (100, 100)) for i in range(3)]

        outcome = await BatchProcessor().process(files)
        ids = [r.id for r in outcome.records]

        assert ids == sorted(ids)
        assert len(set(ids)) == 3

    async def test_unexpected_error_is_contained(self, large_image, small_image):
        class ExplodingTransformer(ImageTransformer):
            async def transform(self, file):
                if file.name == "large.png":
                    raise RuntimeError("boom")
                return await super().transform(file)

        outcome = await BatchProcessor(ExplodingTransformer()).process(
            [large_image, small_image]
        )

        assert [r.name for r in outcome.records] == ["small.png"]
        assert "boom" in outcome.failed[0].error

    async def test_empty_batch(self):
        outcome = await BatchProcessor().process([])

        assert outcome.records == []
        assert outcome.total_original_size == 0
        assert outcome.total_derived_size == 0

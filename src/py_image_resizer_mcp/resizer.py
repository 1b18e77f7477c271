"""图像缩放器接口。

一个 ImageResizer 实例对应一个会话：固定的缩放配置、共享的标识生成器
以及一个工作集。批次之间按调用顺序串行执行。
"""

import asyncio
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .core.transformer import ImageTransformer
from .engine.batch import BatchProcessor
from .engine.working_set import WorkingSet
from .exceptions import ErrorHandler, ValidationError
from .models import (
    AggregateStats,
    BatchOutcome,
    FailedItem,
    InputFile,
    ProcessedImageRecord,
    TransformConfig,
)
from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter
from .utils.naming_helpers import RecordIdSequence


logger = get_logger()


class ImageResizer:
    """图像缩放会话。

    提供上传、移除、清空三个操作，并保证统计数据始终与记录集合一致。
    """

    def __init__(self, config: TransformConfig | None = None, **overrides: Any):
        """初始化缩放会话。

        Args:
            config: 缩放配置，缺省时从全局配置构建
            **overrides: 覆盖配置中的单个字段，如 quality=70

        Raises:
            ValidationError: 配置参数不合法
        """
        try:
            base = config or TransformConfig.from_app_config()
            self.config = (
                TransformConfig(**{**base.model_dump(), **overrides})
                if overrides
                else base
            )
        except PydanticValidationError as e:
            raise ValidationError(
                MessageFormatter.validation_error("config", overrides, str(e))
            ) from e

        self.id_sequence = RecordIdSequence()
        self.transformer = ImageTransformer(self.config)
        self.batch_processor = BatchProcessor(self.transformer, self.id_sequence)
        self.working_set = WorkingSet()
        self._upload_lock = asyncio.Lock()

        logger.debug(f"初始化图像缩放会话: {self.config}")

    @property
    def records(self) -> tuple[ProcessedImageRecord, ...]:
        return self.working_set.records

    @property
    def stats(self) -> AggregateStats:
        return self.working_set.stats

    @property
    def is_processing(self) -> bool:
        """是否有批次正在处理"""
        return self._upload_lock.locked()

    async def upload(self, files: Iterable[InputFile]) -> BatchOutcome:
        """处理一个批次并把成功的记录一次性并入工作集。

        批次执行期间被取消时不会写入任何记录。

        Examples:
            >>> resizer = ImageResizer()
            >>> outcome = await resizer.upload([InputFile.from_path("photo.png")])
            >>> print(resizer.stats.get_summary())
        """
        files = list(files)
        async with self._upload_lock:
            outcome = await self.batch_processor.process(files)
            self.working_set.add_batch(outcome.records)

        logger.info(f"{outcome.get_summary()} | {self.stats.get_summary()}")
        return outcome

    async def upload_paths(self, paths: Sequence[str | Path]) -> BatchOutcome:
        """从磁盘读取文件后上传

        读取失败的文件与缩放失败的文件一起计入失败列表，
        position 为其在 paths 中的位置，列表按输入顺序排列。
        """
        files: list[InputFile] = []
        # files[i] 在 paths 中的位置
        path_positions: list[int] = []
        unreadable: list[FailedItem] = []

        for position, path in enumerate(paths):
            try:
                files.append(InputFile.from_path(path))
                path_positions.append(position)
            except OSError as e:
                ErrorHandler.log_error("文件读取", str(path), e, "warning")
                unreadable.append(
                    FailedItem(name=Path(path).name, error=str(e), position=position)
                )

        outcome = await self.upload(files)
        if unreadable:
            remapped = [
                item.model_copy(update={"position": path_positions[item.position]})
                if item.position is not None
                else item
                for item in outcome.failed
            ]
            outcome.failed = sorted(
                remapped + unreadable,
                key=lambda item: item.position if item.position is not None else -1,
            )
        return outcome

    def remove(self, record_id: str) -> ProcessedImageRecord | None:
        """移除一条记录，标识不存在时为空操作"""
        return self.working_set.remove(record_id)

    def clear_all(self) -> AggregateStats:
        """清空全部记录"""
        return self.working_set.clear_all()

    def summary(self) -> str:
        """会话统计摘要"""
        return self.stats.get_summary()

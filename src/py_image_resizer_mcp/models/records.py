"""处理记录与统计模型。

定义输入文件、缩放结果记录以及基于记录集合折叠得到的统计数据。
"""

import base64
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..utils.size_helpers import format_size, percentage
from .constants import ImageFormats, is_image_mime


class InputFile(BaseModel):
    """调用方提供的原始文件"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="原始文件名")
    mime_type: str = Field(description="声明的 MIME 类型")
    data: bytes = Field(repr=False, description="文件内容")
    declared_size: int | None = Field(
        None, ge=0, description="调用方声明的字节数（缺省为内容长度）"
    )

    @property
    def size(self) -> int:
        """原始字节数"""
        if self.declared_size is not None:
            return self.declared_size
        return len(self.data)

    @property
    def is_image(self) -> bool:
        """声明类型是否为图像"""
        return is_image_mime(self.mime_type)

    @classmethod
    def from_path(cls, path: str | Path) -> "InputFile":
        """从磁盘读取文件，MIME 类型按扩展名推断"""
        path = Path(path)
        return cls(
            name=path.name,
            mime_type=ImageFormats.guess_mime_type(path),
            data=path.read_bytes(),
        )


class EncodedImage(BaseModel):
    """单张图片的编码输出"""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(repr=False, description="编码后的内容")
    mime_type: str = Field(description="输出 MIME 类型")
    width: int = Field(gt=0, description="输出宽度")
    height: int = Field(gt=0, description="输出高度")
    original_dimensions: tuple[int, int] = Field(description="原始尺寸")

    @property
    def size(self) -> int:
        """编码后字节数"""
        return len(self.data)

    @property
    def was_resized(self) -> bool:
        return (self.width, self.height) != self.original_dimensions


class ProcessedImageRecord(BaseModel):
    """缩放成功后生成的记录，创建后不可修改"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="会话内唯一标识")
    name: str = Field(description="原始文件名（仅用于展示）")
    original_size: int = Field(ge=0, description="原始文件大小（字节）")
    derived_size: int = Field(ge=0, description="编码后大小（字节）")
    payload: bytes = Field(repr=False, description="编码后的图像内容")
    mime_type: str = Field(description="payload 的 MIME 类型")
    width: int = Field(gt=0, description="输出宽度")
    height: int = Field(gt=0, description="输出高度")
    original_dimensions: tuple[int, int] | None = Field(None, description="原始尺寸")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def savings_ratio(self) -> float:
        """节省比例（百分比，保留一位小数）"""
        return percentage(self.original_size - self.derived_size, self.original_size)

    @property
    def saved_bytes(self) -> int:
        """节省的字节数"""
        return self.original_size - self.derived_size

    @property
    def data_uri(self) -> str:
        """可直接嵌入展示的 data URI"""
        encoded = base64.b64encode(self.payload).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @classmethod
    def create(
        cls, record_id: str, source: InputFile, encoded: EncodedImage
    ) -> "ProcessedImageRecord":
        """由输入文件与编码结果组装记录"""
        return cls(
            id=record_id,
            name=source.name,
            original_size=source.size,
            derived_size=encoded.size,
            payload=encoded.data,
            mime_type=encoded.mime_type,
            width=encoded.width,
            height=encoded.height,
            original_dimensions=encoded.original_dimensions,
        )

    def get_summary(self) -> str:
        """记录摘要"""
        return (
            f"{self.name}: {format_size(self.original_size)} → "
            f"{format_size(self.derived_size)} ({self.savings_ratio:.1f}% 节省)"
        )


class StatsDelta(BaseModel):
    """一组记录对统计数据的带符号贡献"""

    model_config = ConfigDict(frozen=True)

    count: int = 0
    original_bytes: int = 0
    saved_bytes: int = 0

    @classmethod
    def of_records(cls, records: Iterable[ProcessedImageRecord]) -> "StatsDelta":
        count = original = saved = 0
        for record in records:
            count += 1
            original += record.original_size
            saved += record.saved_bytes
        return cls(count=count, original_bytes=original, saved_bytes=saved)

    def negate(self) -> "StatsDelta":
        return StatsDelta(
            count=-self.count,
            original_bytes=-self.original_bytes,
            saved_bytes=-self.saved_bytes,
        )


class AggregateStats(BaseModel):
    """工作集统计数据

    始终等于对当前工作集中全部记录的折叠结果。
    """

    model_config = ConfigDict(frozen=True)

    processed_count: int = Field(0, ge=0, description="记录数量")
    total_original_bytes: int = Field(0, ge=0, description="原始总大小（字节）")
    total_saved_bytes: int = Field(0, description="节省总大小（字节）")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def compression_ratio(self) -> float:
        """整体压缩比例（百分比，保留一位小数）"""
        return percentage(self.total_saved_bytes, self.total_original_bytes)

    @classmethod
    def zero(cls) -> "AggregateStats":
        return cls()

    @classmethod
    def fold(cls, records: Iterable[ProcessedImageRecord]) -> "AggregateStats":
        """从记录集合直接计算统计数据"""
        return cls.zero().apply(StatsDelta.of_records(records))

    def apply(self, delta: StatsDelta) -> "AggregateStats":
        """应用增量，返回新的统计数据"""
        return AggregateStats(
            processed_count=self.processed_count + delta.count,
            total_original_bytes=self.total_original_bytes + delta.original_bytes,
            total_saved_bytes=self.total_saved_bytes + delta.saved_bytes,
        )

    def get_summary(self) -> str:
        """统计摘要"""
        return (
            f"已处理 {self.processed_count} 张图片, "
            f"原始大小 {format_size(self.total_original_bytes)}, "
            f"节省 {format_size(self.total_saved_bytes)} "
            f"({self.compression_ratio:.1f}%)"
        )


class FailedItem(BaseModel):
    """批次中处理失败的文件"""

    name: str = Field(description="文件名")
    error: str = Field(description="错误信息")
    position: int | None = Field(None, description="在批次输入中的位置")


class BatchOutcome(BaseModel):
    """单个批次的处理结果"""

    records: list[ProcessedImageRecord] = Field(
        default_factory=list, description="成功的记录（保持输入顺序）"
    )
    skipped: list[str] = Field(default_factory=list, description="跳过的非图像文件")
    failed: list[FailedItem] = Field(default_factory=list, description="失败的文件")

    @property
    def total_original_size(self) -> int:
        return sum(r.original_size for r in self.records)

    @property
    def total_derived_size(self) -> int:
        return sum(r.derived_size for r in self.records)

    def get_summary(self) -> str:
        """批次摘要"""
        saved = self.total_original_size - self.total_derived_size
        return (
            f"成功 {len(self.records)} 个, 跳过 {len(self.skipped)} 个, "
            f"失败 {len(self.failed)} 个, 节省 {format_size(saved)}"
        )

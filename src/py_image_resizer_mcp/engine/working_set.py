"""工作集与统计模块。

维护处理记录的有序集合，并以增量方式维护统计数据。
统计数据在任何时刻都等于 AggregateStats.fold(records)。
"""

from collections.abc import Iterable, Iterator

from ..exceptions import NotFoundError, ValidationError
from ..models.records import AggregateStats, ProcessedImageRecord, StatsDelta
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter


logger = get_logger()


class WorkingSet:
    """处理记录集合

    所有修改都在一次同步调用内完成，记录与统计不会出现中间状态。
    """

    def __init__(self) -> None:
        self._records: list[ProcessedImageRecord] = []
        self._stats = AggregateStats.zero()

    @property
    def records(self) -> tuple[ProcessedImageRecord, ...]:
        """只读的有序记录视图"""
        return tuple(self._records)

    @property
    def stats(self) -> AggregateStats:
        return self._stats

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProcessedImageRecord]:
        return iter(self.records)

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def get(self, record_id: str) -> ProcessedImageRecord | None:
        """按标识查找记录"""
        try:
            return self._records[self._locate(record_id)]
        except NotFoundError:
            return None

    def add_batch(self, records: Iterable[ProcessedImageRecord]) -> AggregateStats:
        """追加一批记录并一次性更新统计

        Returns:
            AggregateStats: 更新后的统计数据

        Raises:
            ValidationError: 批次内或与现有记录存在重复标识，此时不做任何修改
        """
        batch = list(records)
        if not batch:
            return self._stats

        seen = {r.id for r in self._records}
        for record in batch:
            if record.id in seen:
                raise ValidationError(
                    MessageFormatter.duplicate_record(record.id), name=record.id
                )
            seen.add(record.id)

        new_stats = self._stats.apply(StatsDelta.of_records(batch))
        self._records.extend(batch)
        self._stats = new_stats
        return new_stats

    def remove(self, record_id: str) -> ProcessedImageRecord | None:
        """移除一条记录，标识不存在时不做任何修改

        Returns:
            ProcessedImageRecord | None: 被移除的记录
        """
        try:
            index = self._locate(record_id)
        except NotFoundError as e:
            logger.debug(e.message)
            return None

        record = self._records[index]
        new_stats = self._stats.apply(StatsDelta.of_records([record]).negate())
        del self._records[index]
        self._stats = new_stats
        return record

    def clear_all(self) -> AggregateStats:
        """清空记录并直接重置统计"""
        self._records.clear()
        self._stats = AggregateStats.zero()
        return self._stats

    def verify(self) -> bool:
        """检查增量维护的统计是否等于从记录折叠的结果"""
        return self._stats == AggregateStats.fold(self._records)

    def _locate(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise NotFoundError(MessageFormatter.record_not_found(record_id), name=record_id)

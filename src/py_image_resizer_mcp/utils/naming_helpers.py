"""记录标识生成模块。

为处理结果分配会话内唯一、按创建顺序递增的标识。
"""

import itertools


class RecordIdSequence:
    """单调递增的记录标识生成器

    每个会话持有一个实例，生成的标识在会话内不会重复。
    """

    def __init__(self, prefix: str = "img", width: int = 6) -> None:
        self.prefix = prefix
        self.width = width
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        """生成下一个标识，如 img-000001"""
        return f"{self.prefix}-{next(self._counter):0{self.width}d}"

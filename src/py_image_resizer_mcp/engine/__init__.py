"""图像缩放处理引擎模块。

包含批量处理与工作集统计等核心处理逻辑。
"""

from .batch import BatchProcessor
from .working_set import WorkingSet


__all__ = [
    "BatchProcessor",
    "WorkingSet",
]

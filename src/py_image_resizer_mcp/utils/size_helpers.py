"""文件大小格式化工具。"""

from decimal import ROUND_HALF_UP, Decimal

from humanize import naturalsize


def format_size(size_bytes: int) -> str:
    """格式化文件大小为人类可读格式"""
    return naturalsize(size_bytes, binary=True)


def percentage(part: int, whole: int) -> float:
    """计算百分比并保留一位小数（精确计算，.x5 向远离零方向进位），whole 为 0 时返回 0.0"""
    if whole == 0:
        return 0.0
    exact = Decimal(part) * 100 / Decimal(whole)
    return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

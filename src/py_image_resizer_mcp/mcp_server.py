"""图像缩放 MCP 服务器。

以工具形式暴露一个全局缩放会话的上传、移除、清空与统计查询。
"""

from typing import Any

from fastmcp import FastMCP

from .models import AggregateStats, BatchOutcome, ProcessedImageRecord
from .resizer import ImageResizer
from .utils.logging_helpers import get_logger, setup_logging
from .utils.message_formatter import MessageFormatter
from .utils.size_helpers import format_size


# MCP 服务器响应类型定义
MCPResponse = dict[str, Any]


class MCPResponseBuilder:
    """MCP 服务器响应构建器，专门用于构建符合 MCP 协议的响应格式。"""

    @staticmethod
    def error(
        message: str,
        error_type: str = "general",
        details: dict[str, Any] | None = None,
    ) -> MCPResponse:
        """构建错误结果。

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 额外的错误详情

        Returns:
            dict: 标准化的错误响应
        """
        result: MCPResponse = {
            "success": False,
            "error": message,
            "error_type": error_type,
        }

        if details:
            result["details"] = details

        return result

    @staticmethod
    def processing_error(message: str, operation: str | None = None) -> MCPResponse:
        """构建处理错误结果。"""
        details = {"operation": operation} if operation else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="processing",
            details=details,
        )

    @staticmethod
    def stats(stats: AggregateStats) -> dict[str, Any]:
        """格式化统计数据"""
        return {
            "processed_count": stats.processed_count,
            "total_original_bytes": stats.total_original_bytes,
            "total_saved_bytes": stats.total_saved_bytes,
            "compression_ratio": stats.compression_ratio,
            "total_original_human": format_size(stats.total_original_bytes),
            "total_saved_human": format_size(stats.total_saved_bytes),
            "summary": stats.get_summary(),
        }

    @staticmethod
    def record(
        record: ProcessedImageRecord, include_payload: bool = False
    ) -> dict[str, Any]:
        """格式化单条记录，payload 默认省略"""
        result: dict[str, Any] = {
            "id": record.id,
            "name": record.name,
            "original_size": record.original_size,
            "derived_size": record.derived_size,
            "savings_ratio": record.savings_ratio,
            "width": record.width,
            "height": record.height,
            "mime_type": record.mime_type,
            "summary": record.get_summary(),
        }
        if include_payload:
            result["data_uri"] = record.data_uri
        return result

    @staticmethod
    def batch(outcome: BatchOutcome, stats: AggregateStats) -> MCPResponse:
        """格式化批次结果"""
        return {
            "success": True,
            "records": [MCPResponseBuilder.record(r) for r in outcome.records],
            "skipped": outcome.skipped,
            "failed": [item.model_dump() for item in outcome.failed],
            "total_original_size": outcome.total_original_size,
            "total_derived_size": outcome.total_derived_size,
            "summary": outcome.get_summary(),
            "stats": MCPResponseBuilder.stats(stats),
        }


logger = get_logger()

# 创建MCP应用
mcp: FastMCP[Any] = FastMCP("图像缩放服务")

# 全局缩放会话
resizer = ImageResizer()


@mcp.tool()
async def upload_images(paths: list[str]) -> MCPResponse:
    """批量缩放图片并加入当前工作集。

    非图像文件会被跳过，单个文件失败不影响其余文件。

    Args:
        paths: 图片文件路径列表，按此顺序处理

    Returns:
        dict: 成功的记录、跳过与失败的文件，以及更新后的统计
    """
    try:
        outcome = await resizer.upload_paths(paths)
        return MCPResponseBuilder.batch(outcome, resizer.stats)
    except Exception as e:
        logger.error(MessageFormatter.operation_failed("批量缩放", paths, e))
        return MCPResponseBuilder.processing_error(str(e), "批量缩放")


@mcp.tool()
def remove_image(image_id: str) -> MCPResponse:
    """从工作集中移除一张图片，标识不存在时不做任何修改。

    Args:
        image_id: 记录标识

    Returns:
        dict: 是否移除以及更新后的统计
    """
    removed = resizer.remove(image_id)
    return {
        "success": True,
        "removed": removed is not None,
        "stats": MCPResponseBuilder.stats(resizer.stats),
    }


@mcp.tool()
def clear_images() -> MCPResponse:
    """清空工作集并重置统计。"""
    stats = resizer.clear_all()
    return {"success": True, "stats": MCPResponseBuilder.stats(stats)}


@mcp.tool()
def get_stats(include_payload: bool = False) -> MCPResponse:
    """获取当前统计与记录列表。

    Args:
        include_payload: 是否附带 data URI 形式的图片内容

    Returns:
        dict: 统计数据、记录列表与处理状态
    """
    return {
        "success": True,
        "is_processing": resizer.is_processing,
        "stats": MCPResponseBuilder.stats(resizer.stats),
        "records": [
            MCPResponseBuilder.record(r, include_payload) for r in resizer.records
        ],
    }


# ============================================================================
# 应用入口
# ============================================================================


def main(log_level: str | None = None) -> None:
    """启动 MCP 服务器"""
    setup_logging(log_level)
    logger.info("启动图像缩放 MCP 服务器")
    mcp.run()


if __name__ == "__main__":
    main()

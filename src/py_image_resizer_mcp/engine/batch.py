"""批量处理器模块。

按输入顺序逐个缩放文件，单个文件失败不会中断整个批次。
"""

from collections.abc import Iterable

from ..core.transformer import ImageTransformer
from ..exceptions import ErrorHandler, UnsupportedInputError
from ..models.records import BatchOutcome, InputFile, ProcessedImageRecord
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from ..utils.naming_helpers import RecordIdSequence


logger = get_logger()


class BatchProcessor:
    """批量图像处理器

    一次只处理一个文件，结果顺序与输入顺序一致。
    """

    def __init__(
        self,
        transformer: ImageTransformer | None = None,
        id_sequence: RecordIdSequence | None = None,
    ):
        """初始化批量处理器

        Args:
            transformer: 单张图片缩放器
            id_sequence: 记录标识生成器，同一会话应共享同一个实例
        """
        self.transformer = transformer or ImageTransformer()
        self.id_sequence = id_sequence or RecordIdSequence()

    async def process(self, files: Iterable[InputFile]) -> BatchOutcome:
        """处理一个批次

        Args:
            files: 按顺序排列的候选文件

        Returns:
            BatchOutcome: 成功记录（保持输入顺序）、跳过与失败的文件
        """
        outcome = BatchOutcome()

        for position, file in enumerate(files):
            try:
                record = await self._process_one(file)
            except UnsupportedInputError:
                logger.debug(MessageFormatter.not_an_image(file.name, file.mime_type))
                outcome.skipped.append(file.name)
                continue
            except Exception as e:
                outcome.failed.append(
                    ErrorHandler.failed_item(e, file.name, position=position)
                )
                continue

            outcome.records.append(record)

        logger.info(
            MessageFormatter.batch_finished(
                len(outcome.records), len(outcome.skipped), len(outcome.failed)
            )
        )
        return outcome

    async def _process_one(self, file: InputFile) -> ProcessedImageRecord:
        """缩放单个文件并分配标识"""
        if not file.is_image:
            raise UnsupportedInputError(
                MessageFormatter.not_an_image(file.name, file.mime_type), name=file.name
            )

        encoded = await self.transformer.transform(file)
        # 仅在成功后分配标识，保证标识顺序与成功记录顺序一致
        return ProcessedImageRecord.create(self.id_sequence.next_id(), file, encoded)

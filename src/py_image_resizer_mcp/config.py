"""统一配置管理模块。

提供缩放管线的默认参数与日志配置，支持环境变量覆盖。
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ResizeDefaults:
    """缩放与编码相关的默认配置"""

    # 尺寸上限
    MAX_WIDTH: int = 800
    MAX_HEIGHT: int = 800

    # 编码设置
    OUTPUT_FORMAT: str = "JPEG"
    QUALITY: int = 80
    ROTATION: int = 0


@dataclass(frozen=True)
class LoggingDefaults:
    """日志相关的默认配置"""

    # 日志级别
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 文件日志
    ENABLE_FILE_LOGGING: bool = False
    LOG_FILE_PATH: str = "py_image_resizer.log"
    LOG_FILE_MAX_SIZE: int = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT: int = 5


class AppConfig:
    """应用程序配置管理器

    支持环境变量覆盖默认配置
    """

    def __init__(self):
        self.resize = ResizeDefaults()
        self.logging = LoggingDefaults()

        # 从环境变量加载配置
        self._load_from_env()

    def _load_from_env(self):
        """从环境变量加载配置"""
        # 缩放配置
        if max_width := os.getenv("PIR_MAX_WIDTH"):
            object.__setattr__(self.resize, "MAX_WIDTH", int(max_width))

        if max_height := os.getenv("PIR_MAX_HEIGHT"):
            object.__setattr__(self.resize, "MAX_HEIGHT", int(max_height))

        if output_format := os.getenv("PIR_OUTPUT_FORMAT"):
            object.__setattr__(self.resize, "OUTPUT_FORMAT", output_format.upper())

        if quality := os.getenv("PIR_QUALITY"):
            object.__setattr__(self.resize, "QUALITY", int(quality))

        # 日志配置
        if log_level := os.getenv("PIR_LOG_LEVEL"):
            object.__setattr__(self.logging, "LOG_LEVEL", log_level.upper())

        if enable_file_log := os.getenv("PIR_ENABLE_FILE_LOGGING"):
            object.__setattr__(
                self.logging,
                "ENABLE_FILE_LOGGING",
                enable_file_log.lower() in ("true", "1", "yes"),
            )


# 全局配置实例
config = AppConfig()


def get_config() -> AppConfig:
    """获取全局配置实例"""
    return config


def reset_config():
    """重置配置（主要用于测试）"""
    global config
    config = AppConfig()

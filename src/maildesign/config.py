"""
应用配置管理模块
使用 pydantic-settings 统一管理环境变量和配置
"""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="MAILDESIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 设计稿持久化位置（单一存储槽）
    store_path: Path = Field(default=Path("./temp/email_design.json"))

    # Body 默认值
    content_width: str = Field(default="600px", pattern=r"^\d+(px|%)?$")
    background_color: str = Field(default="#ffffff")
    text_color: str = Field(default="#000000")
    font_family_label: str = Field(default="Arial")
    font_family_value: str = Field(default='Arial, "Helvetica Neue", Helvetica, sans-serif')

    # 日志配置
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )


# 全局配置实例（懒加载）
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(level: str | None = None) -> None:
    """配置 loguru 日志（单一 stderr 输出）"""
    settings = get_settings()

    # 移除默认 handler
    logger.remove()

    # 添加控制台输出
    logger.add(
        sys.stderr,
        format=settings.log_format,
        level=level or settings.log_level,
        colorize=True,
    )

"""
设计稿持久化
单一 JSON 存储槽，整体覆盖写入
"""

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .config import get_settings
from .models import Design

# 旧版本误存的默认红色设计稿
LEGACY_BACKGROUNDS = {"#ff0000", "red"}
LEGACY_TEXT_COLOR = "#ff0000"


def is_legacy_design(design: Design) -> bool:
    """是否为需要丢弃的旧版默认设计稿"""
    if design.body is None:
        return False
    values = design.body.values
    return (
        values.background_color.lower() in LEGACY_BACKGROUNDS
        or values.text_color.lower() == LEGACY_TEXT_COLOR
    )


@dataclass
class DesignStore:
    """设计稿存储"""

    path: Path = field(default_factory=lambda: get_settings().store_path)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> Design:
        """读取设计稿；缺失或损坏时返回空设计稿"""
        if not self.path.exists():
            return Design.empty()

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"存储的设计稿不是有效的 UTF-8（{e.reason}），已清除")
            self.clear()
            return Design.empty()
        except OSError as e:
            logger.warning(f"读取设计稿失败: {e}")
            return Design.empty()

        try:
            design = Design.from_json(text)
        except ValidationError as e:
            logger.warning(f"存储的设计稿无效（{e.error_count()} 处错误），已清除")
            self.clear()
            return Design.empty()

        if design.body is None:
            logger.warning("存储的设计稿缺少 body，已清除")
            self.clear()
            return Design.empty()

        if is_legacy_design(design):
            logger.warning("检测到旧版默认设计稿，已清除")
            self.clear()
            return Design.empty()

        logger.debug(f"已加载设计稿: {self.path}")
        return design

    def save(self, design: Design) -> bool:
        """保存设计稿（原子替换）；空设计稿不保存"""
        if design is None or design.body is None:
            logger.warning("设计稿为空，跳过保存")
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(design.to_dict(), f, ensure_ascii=False, indent=2)
            os.replace(temp_name, self.path)
        except OSError as e:
            logger.error(f"保存设计稿失败: {e}")
            Path(temp_name).unlink(missing_ok=True)
            return False

        logger.info(f"设计稿已保存: {self.path}")
        return True

    def clear(self) -> None:
        """删除存储槽"""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"删除设计稿失败: {e}")

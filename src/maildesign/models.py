"""
数据模型定义模块
包含枚举、dataclass 和 Pydantic 模型

设计树（Design -> Body -> Row -> Column -> Component）即与编辑器组件、
持久化层交换的 JSON 结构：键名使用 camelCase，列宽使用 ``_width``，
未知字段原样保留，缺失字段一律取默认值。
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Annotated, Any, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator
from pydantic.alias_generators import to_camel

# ============ 枚举定义 ============


class ComponentType(StrEnum):
    """内容组件类型"""

    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"
    HTML = "html"


# ============ 内部数据模型 (dataclass) ============


@dataclass
class CssRule:
    """内部样式表规则"""

    selector: str
    styles: dict[str, str] = field(default_factory=dict)


@dataclass
class ProcessingState:
    """处理状态（替代全局变量）"""

    design: "Design | None" = None
    html: str = ""
    plain_text: str = ""


# ============ 设计树模型 (Pydantic) ============


def _log_missing(data: Any, keys: tuple[str, ...], owner: str) -> None:
    """记录缺失字段（仅诊断，不报错）"""
    if not isinstance(data, dict):
        return
    missing = [key for key in keys if key not in data]
    if missing:
        logger.debug(f"{owner} 缺少字段 {missing}，使用默认值")


class DesignNode(BaseModel):
    """设计树节点基类"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class FontFamily(DesignNode):
    """字体"""

    label: str = ""
    value: str = ""


class ImageSource(DesignNode):
    """图片地址"""

    url: str = ""
    width: int | str | None = None
    height: int | str | None = None


class Link(DesignNode):
    """链接"""

    url: str = ""
    target: str = "_blank"


class ButtonColors(DesignNode):
    """按钮配色"""

    color: str = "#ffffff"
    background_color: str = "#3AAEE0"


class BoxValues(DesignNode):
    """组件共享的盒模型样式"""

    padding: str | None = None
    text_align: str | None = None
    background_color: str | None = None
    border_top: str | None = None
    border_bottom: str | None = None
    border_left: str | None = None
    border_right: str | None = None
    border_radius: str | None = None
    box_shadow: str | None = None


class TypographyValues(BoxValues):
    """排版样式"""

    color: str | None = None
    font_size: str | None = None
    font_weight: int | str | None = None
    line_height: str | None = None
    letter_spacing: str | None = None
    font_family: FontFamily | None = None


class TextValues(TypographyValues):
    """文本组件"""

    text: str = ""
    padding_top: str | None = None
    padding_right: str | None = None
    padding_bottom: str | None = None
    padding_left: str | None = None
    margin_top: str | None = None
    margin_right: str | None = None
    margin_bottom: str | None = None
    margin_left: str | None = None


class ImageValues(BoxValues):
    """图片组件"""

    src: ImageSource = Field(default_factory=ImageSource)
    alt_text: str = "Image"
    width: str | None = None
    auto_width: bool | None = None
    href: Link | None = None


class ButtonValues(TypographyValues):
    """按钮组件"""

    text: str = "Button"
    href: Link = Field(default_factory=Link)
    button_colors: ButtonColors = Field(default_factory=ButtonColors)


class HtmlValues(BoxValues):
    """原始 HTML 组件"""

    html: str | None = None
    content: str | None = None


class TextComponent(DesignNode):
    type: Literal["text"] = "text"
    values: TextValues = Field(default_factory=TextValues)


class ImageComponent(DesignNode):
    type: Literal["image"] = "image"
    values: ImageValues = Field(default_factory=ImageValues)


class ButtonComponent(DesignNode):
    type: Literal["button"] = "button"
    values: ButtonValues = Field(default_factory=ButtonValues)


class HtmlComponent(DesignNode):
    type: Literal["html"] = "html"
    values: HtmlValues = Field(default_factory=HtmlValues)


class OpaqueComponent(DesignNode):
    """编辑器里的其他组件类型（divider、social 等），原样保留，不渲染"""

    type: str
    values: dict[str, Any] = Field(default_factory=dict)


def _component_tag(value: Any) -> str:
    """按 type 选择组件模型，未知类型归入 opaque"""
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in {member.value for member in ComponentType}:
        return kind
    return "opaque"


Component = Annotated[
    Annotated[TextComponent, Tag("text")]
    | Annotated[ImageComponent, Tag("image")]
    | Annotated[ButtonComponent, Tag("button")]
    | Annotated[HtmlComponent, Tag("html")]
    | Annotated[OpaqueComponent, Tag("opaque")],
    Discriminator(_component_tag),
]


class ColumnValues(DesignNode):
    """列样式"""

    width: str | None = Field(default=None, alias="_width")
    padding: str | None = None
    background_color: str | None = None
    vertical_align: str | None = None
    border_top: str | None = None
    border_bottom: str | None = None
    border_left: str | None = None
    border_right: str | None = None
    border_radius: str | None = None


class Column(DesignNode):
    """栅格列"""

    contents: list[Component] = Field(default_factory=list)
    values: ColumnValues = Field(default_factory=ColumnValues)

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, data: Any) -> Any:
        _log_missing(data, ("contents", "values"), "Column")
        return data


class RowValues(DesignNode):
    """行样式"""

    background_color: str | None = None
    vertical_align: str | None = None
    padding: str | None = None
    padding_top: str | None = None
    padding_right: str | None = None
    padding_bottom: str | None = None
    padding_left: str | None = None
    border_top: str | None = None
    border_bottom: str | None = None
    border_left: str | None = None
    border_right: str | None = None


class Row(DesignNode):
    """设计行：cells 为 12 栅格宽度，与 columns 一一对应"""

    cells: list[int] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
    values: RowValues = Field(default_factory=RowValues)

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, data: Any) -> Any:
        _log_missing(data, ("cells", "columns", "values"), "Row")
        return data


class BodyValues(DesignNode):
    """全局样式"""

    background_color: str = "#ffffff"
    content_width: str = "600px"
    font_family: FontFamily | None = None
    text_color: str = "#000000"


class Body(DesignNode):
    rows: list[Row] = Field(default_factory=list)
    values: BodyValues = Field(default_factory=BodyValues)

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, data: Any) -> Any:
        _log_missing(data, ("rows", "values"), "Body")
        return data


class Design(DesignNode):
    """设计稿根节点"""

    body: Body | None = None
    schema_version: int = 1

    @classmethod
    def empty(cls) -> "Design":
        """空设计稿（无任何行）"""
        return cls(body=Body())

    @classmethod
    def from_json(cls, text: str) -> "Design":
        """从 JSON 字符串加载"""
        return cls.model_validate_json(text)

    def to_dict(self) -> dict[str, Any]:
        """导出为可 JSON 序列化的字典"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        """导出为 JSON 字符串"""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

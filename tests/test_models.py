"""
设计树模型测试
"""

from maildesign.models import (
    Column,
    ColumnValues,
    Design,
    ImageComponent,
    OpaqueComponent,
    Row,
)


def test_json_round_trip(sample_design):
    assert Design.from_json(sample_design.to_json()) == sample_design


def test_camel_case_keys(sample_design):
    data = sample_design.to_dict()
    values = data["body"]["values"]
    assert values["backgroundColor"] == "#f0f0f0"
    assert values["contentWidth"] == "640px"
    image = data["body"]["rows"][1]["columns"][1]["contents"][0]
    assert image["values"]["altText"] == "Logo"


def test_column_width_alias():
    values = ColumnValues.model_validate({"_width": "50%"})
    assert values.width == "50%"
    assert values.model_dump(by_alias=True, exclude_none=True) == {"_width": "50%"}
    assert ColumnValues(width="25%").width == "25%"


def test_component_discriminator():
    column = Column.model_validate(
        {
            "contents": [
                {"type": "image", "values": {"src": {"url": "a.png"}}},
                {"type": "divider", "values": {"width": "100%"}},
            ]
        }
    )
    image, divider = column.contents
    assert isinstance(image, ImageComponent)
    assert image.values.src.url == "a.png"
    assert isinstance(divider, OpaqueComponent)
    assert divider.model_dump() == {"type": "divider", "values": {"width": "100%"}}


def test_unknown_fields_preserved():
    design = Design.model_validate(
        {"counters": {"u_row": 3}, "body": {"id": "abc", "rows": [], "values": {}}}
    )
    data = design.to_dict()
    assert data["counters"] == {"u_row": 3}
    assert data["body"]["id"] == "abc"


def test_missing_fields_defaulted():
    row = Row.model_validate({})
    assert row.cells == []
    assert row.columns == []
    assert row.values.background_color is None


def test_empty_design():
    design = Design.empty()
    assert design.body.rows == []
    assert design.body.values.content_width == "600px"
    assert design.schema_version == 1

"""
设计稿持久化测试
"""

import json

import pytest

from maildesign.models import Design
from maildesign.store import DesignStore, is_legacy_design


@pytest.fixture
def store(store_path) -> DesignStore:
    return DesignStore(store_path)


def test_missing_slot_returns_empty(store):
    design = store.load()
    assert design.body is not None
    assert design.body.rows == []


def test_save_and_load(store, sample_design):
    assert store.save(sample_design) is True
    assert store.load().to_dict() == sample_design.to_dict()


def test_saved_file_uses_wire_format(store, sample_design):
    store.save(sample_design)
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["body"]["values"]["contentWidth"] == "640px"
    assert data["body"]["rows"][0]["columns"][0]["values"]["_width"] == "100%"


def test_save_leaves_no_temp_files(store, sample_design):
    store.save(sample_design)
    store.save(sample_design)
    assert list(store.path.parent.iterdir()) == [store.path]


def test_empty_design_not_saved(store):
    assert store.save(Design()) is False
    assert not store.path.exists()


@pytest.mark.parametrize(
    "values",
    [
        {"backgroundColor": "#ff0000"},
        {"backgroundColor": "red"},
        {"textColor": "#FF0000"},
    ],
)
def test_legacy_design_discarded(store, values):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"body": {"rows": [], "values": values}}), encoding="utf-8")

    design = store.load()

    assert design.body.rows == []
    assert design.body.values.background_color == "#ffffff"
    assert not store.path.exists()


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"body": {"rows": 5}}), json.dumps({"schemaVersion": 1})],
)
def test_corrupt_slot_discarded(store, content):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(content, encoding="utf-8")

    assert store.load().body.rows == []
    assert not store.path.exists()


def test_undecodable_slot_discarded(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_bytes(b'{"body": "\xff\xfe"}')

    design = store.load()

    assert design.body.rows == []
    assert not store.path.exists()


def test_clear(store, sample_design):
    store.save(sample_design)
    store.clear()
    assert not store.path.exists()
    store.clear()


def test_is_legacy_design(sample_design):
    assert not is_legacy_design(sample_design)
    assert not is_legacy_design(Design())

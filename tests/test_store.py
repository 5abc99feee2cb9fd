import json

import pytest

from core.errors import CorruptStoreError, StoreError
from core.store import JsonStore


def test_load_missing_file_returns_empty_list(tmp_path):
    assert JsonStore(tmp_path / "missing.json").load() == []


def test_save_then_load_preserves_order(tmp_path):
    store = JsonStore(tmp_path / "items.json")
    records = [{"id": 2}, {"id": 1}, {"id": 3}]

    store.save(records)

    assert store.load() == records


def test_save_writes_indented_json(tmp_path):
    path = tmp_path / "items.json"
    JsonStore(path).save([{"username": "alice"}])

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == [{"username": "alice"}]
    assert "\n  " in text


def test_save_creates_parent_directories_and_leaves_no_temp_files(tmp_path):
    path = tmp_path / "nested" / "dir" / "items.json"
    JsonStore(path).save([])

    assert path.exists()
    assert [p.name for p in path.parent.iterdir()] == ["items.json"]


def test_save_overwrites_previous_content(tmp_path):
    store = JsonStore(tmp_path / "items.json")
    store.save([{"id": 1}, {"id": 2}])
    store.save([{"id": 3}])

    assert store.load() == [{"id": 3}]


def test_load_invalid_json_raises_corrupt_store_error(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CorruptStoreError):
        JsonStore(path).load()


def test_load_non_list_raises_corrupt_store_error(tmp_path):
    path = tmp_path / "items.json"
    path.write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(CorruptStoreError):
        JsonStore(path).load()


def test_save_io_failure_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(StoreError):
        JsonStore(blocker / "items.json").save([])


def test_transaction_saves_mutations(tmp_path):
    store = JsonStore(tmp_path / "items.json")

    with store.transaction() as records:
        records.append({"id": 1})

    assert store.load() == [{"id": 1}]


def test_transaction_skips_save_when_block_raises(tmp_path):
    store = JsonStore(tmp_path / "items.json")
    store.save([{"id": 1}])

    with pytest.raises(RuntimeError):
        with store.transaction() as records:
            records.append({"id": 2})
            raise RuntimeError("boom")

    assert store.load() == [{"id": 1}]


def test_load_non_utf8_bytes_raises_corrupt_store_error(tmp_path):
    path = tmp_path / "items.json"
    path.write_bytes(b'[{"username": "\xff\xfe"}]')

    with pytest.raises(CorruptStoreError):
        JsonStore(path).load()

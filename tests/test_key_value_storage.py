import pytest

from garden_assistant.shared.core.exceptions import CorruptedDataError, StorageError
from garden_assistant.shared.infrastructure.storage.key_value_storage import (
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    create_storage,
)


@pytest.fixture(params=["memory", "file"])
def any_storage(request, tmp_path):
    if request.param == "memory":
        return InMemoryKeyValueStorage()
    return FileKeyValueStorage(tmp_path / "store")


def test_missing_key_reads_none(any_storage):
    assert any_storage.get_item("wateringReminders") is None


def test_set_get_and_replace(any_storage):
    any_storage.set_item("wateringReminders", '[{"plantName": "مونسترا"}]')
    any_storage.set_item("wateringReminders", "[]")

    assert any_storage.get_item("wateringReminders") == "[]"


def test_remove_is_idempotent(any_storage):
    any_storage.set_item("wateringReminders", "[]")

    any_storage.remove_item("wateringReminders")
    any_storage.remove_item("wateringReminders")

    assert any_storage.get_item("wateringReminders") is None


def test_file_storage_persists_across_instances(tmp_path):
    FileKeyValueStorage(tmp_path).set_item("wateringReminders", "داده")

    assert FileKeyValueStorage(tmp_path).get_item("wateringReminders") == "داده"
    assert (tmp_path / "wateringReminders.json").read_text(encoding="utf-8") == "داده"


def test_file_storage_leaves_no_temp_files(tmp_path):
    storage = FileKeyValueStorage(tmp_path)
    storage.set_item("wateringReminders", "[]")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["wateringReminders.json"]


@pytest.mark.parametrize("key", ["../escape", "a/b", "", "with space"])
def test_file_storage_rejects_unsafe_keys(tmp_path, key):
    with pytest.raises(StorageError):
        FileKeyValueStorage(tmp_path).set_item(key, "x")


def test_file_storage_is_writable_before_directory_exists(tmp_path):
    assert FileKeyValueStorage(tmp_path / "new").is_writable()


def test_create_storage_picks_backend(tmp_path):
    assert isinstance(create_storage(), InMemoryKeyValueStorage)
    assert isinstance(create_storage(tmp_path), FileKeyValueStorage)


def test_file_storage_reports_undecodable_value_as_corrupted(tmp_path):
    (tmp_path / "wateringReminders.json").write_bytes(b"\xff\xfe not utf-8")

    with pytest.raises(CorruptedDataError) as exc_info:
        FileKeyValueStorage(tmp_path).get_item("wateringReminders")

    assert isinstance(exc_info.value, StorageError)
    assert exc_info.value.details == {"key": "wateringReminders", "operation": "read"}

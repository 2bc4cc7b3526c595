import json

from data.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_basics():
    s = MemoryStorage()
    assert s.get_item("k") is None
    s.set_item("k", "v")
    assert s.get_item("k") == "v"
    s.remove_item("k")
    s.remove_item("k")  # removing twice is fine
    assert s.get_item("k") is None


def test_file_storage_missing_file(temp_dir_fixture):
    s = JsonFileStorage(temp_dir_fixture / "nope.json")
    assert s.get_item("k") is None
    assert s.keys() == []


def test_file_storage_survives_new_instance(temp_dir_fixture):
    path = temp_dir_fixture / "nested" / "dir" / "storage.json"
    JsonFileStorage(path).set_item("trading_calc_history", "[]")

    assert path.exists()
    assert JsonFileStorage(path).get_item("trading_calc_history") == "[]"
    assert json.loads(path.read_text(encoding="utf-8")) == {"trading_calc_history": "[]"}


def test_file_storage_remove_keeps_other_keys(temp_dir_fixture):
    path = temp_dir_fixture / "storage.json"
    s = JsonFileStorage(path)
    s.set_item("a", "1")
    s.set_item("b", "2")

    s.remove_item("a")

    assert JsonFileStorage(path).get_item("a") is None
    assert JsonFileStorage(path).get_item("b") == "2"
    assert sorted(s.keys()) == ["b"]


def test_file_storage_remove_missing_key_does_not_write(temp_dir_fixture):
    path = temp_dir_fixture / "storage.json"
    JsonFileStorage(path).remove_item("a")
    assert not path.exists()


def test_file_storage_corrupt_file_reads_empty(temp_dir_fixture):
    path = temp_dir_fixture / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    s = JsonFileStorage(path)

    assert s.get_item("a") is None
    s.set_item("a", "1")
    assert JsonFileStorage(path).get_item("a") == "1"


def test_file_storage_non_utf8_reads_empty(temp_dir_fixture):
    path = temp_dir_fixture / "storage.json"
    path.write_bytes(b'{"trading_calc_history": "\xff\xfe"}')
    s = JsonFileStorage(path)

    assert s.get_item("trading_calc_history") is None
    s.set_item("trading_calc_history", "[]")
    assert JsonFileStorage(path).get_item("trading_calc_history") == "[]"


def test_file_storage_directory_path_reads_empty(temp_dir_fixture):
    assert JsonFileStorage(temp_dir_fixture).get_item("a") is None


def test_file_storage_non_object_reads_empty(temp_dir_fixture):
    path = temp_dir_fixture / "storage.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStorage(path).get_item("a") is None


def test_file_storage_leaves_no_temp_files(temp_dir_fixture):
    s = JsonFileStorage(temp_dir_fixture / "storage.json")
    for i in range(5):
        s.set_item("k", str(i))
    assert [p.name for p in temp_dir_fixture.iterdir()] == ["storage.json"]

import pytest

from pcskit.hashtable import Hashtable


def test_add_and_get():
    table = Hashtable()
    table.add("alpha", 1)
    table.add("beta", 2)
    assert table.get("alpha") == 1
    assert table.get("beta") == 2
    assert len(table) == 2


def test_get_missing_returns_default():
    table = Hashtable()
    assert table.get("nothing") is None
    assert table.get("nothing", "fallback") == "fallback"


def test_add_duplicate_raises():
    table = Hashtable()
    table.add("key", 1)
    with pytest.raises(KeyError):
        table.add("key", 2)
    assert table.get("key") == 1
    assert len(table) == 1


def test_set_returns_old_value():
    table = Hashtable()
    assert table.set("k", "first") is None
    assert table.set("k", "second") == "first"
    assert table.get("k") == "second"
    assert len(table) == 1


def test_remove():
    table = Hashtable()
    table.add("x", 10)
    assert table.remove("x") == 10
    assert "x" not in table
    assert len(table) == 0


def test_remove_missing_raises():
    table = Hashtable()
    with pytest.raises(KeyError):
        table.remove("absent")


def test_case_sensitive_by_default():
    table = Hashtable()
    table.add("Name", 1)
    assert table.has("Name")
    assert not table.has("name")


def test_ignore_case():
    table = Hashtable(ignore_case=True)
    table.add("Name", 1)
    assert table.has("NAME")
    assert table.get("name") == 1
    with pytest.raises(KeyError):
        table.add("nAmE", 2)


def test_grows_past_capacity():
    table = Hashtable(capacity=17)
    keys = [f"key{i}" for i in range(200)]
    for i, key in enumerate(keys):
        table.add(key, i)
    assert len(table) == 200
    assert table.capacity >= 17
    assert all(table.get(key) == i for i, key in enumerate(keys))


def test_expand_keeps_items():
    table = Hashtable()
    for i in range(10):
        table.add(str(i), i * i)
    table.expand(100)
    assert table.capacity == 100
    assert len(table) == 10
    assert sorted(table.items()) == sorted((str(i), i * i) for i in range(10))


def test_iteration_covers_everything():
    table = Hashtable()
    data = {"a": 1, "b": 2, "c": 3, "dd": 4}
    for key, value in data.items():
        table.add(key, value)
    assert sorted(table) == sorted(data)
    assert sorted(table.values()) == sorted(data.values())
    assert dict(table.items()) == data


def test_clear():
    table = Hashtable()
    table.add("a", 1)
    table.add("b", 2)
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    table.add("a", 3)
    assert table.get("a") == 3


def test_non_ascii_keys():
    table = Hashtable(ignore_case=True)
    table.add("目录", "dir")
    table.add("文件", "file")
    assert table.get("目录") == "dir"
    assert table.get("文件") == "file"


def test_contains_non_string():
    table = Hashtable()
    table.add("1", 1)
    assert 1 not in table
    assert "1" in table
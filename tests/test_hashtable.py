import pytest

from dsbasics.hashtable import SIZE, HashTable, hash_key, main


@pytest.fixture
def table():
    return HashTable()


@pytest.mark.parametrize("key", ["", "Kiro", "Dodo", "Mrmr", "a", "zzzzzzzz"])
def test_hash_key_in_range(key):
    assert 1 <= hash_key(key) <= SIZE - 1


def test_hash_key_ignores_order():
    assert hash_key("Kiro") == hash_key("oriK")


def test_set_then_get(table):
    table.set("Kiro", 1)
    assert table.get("Kiro") == 1
    assert "Kiro" in table


@pytest.mark.parametrize(("key", "block"), [("ab", 1), ("ba", 2)])
def test_find_reports_block(table, key, block):
    for stored in ("ab", "ba"):
        table.set(stored, len(table) + 1)
    assert table.find(key) == (hash_key(key), block)
    assert table.get(key) == block
    assert len(table) == 2


def test_duplicate_key_keeps_first_value(table):
    for value in (1, 9):
        table.set("Kiro", value)
    assert table.get("Kiro") == 1
    assert len(table) == 2


@pytest.mark.parametrize(("stored", "wanted"), [(None, "Kiro"), ("ab", "ba")])
def test_missing_key_raises(table, stored, wanted):
    if stored:
        table.set(stored, 1)
    with pytest.raises(KeyError):
        table.get(wanted)
    with pytest.raises(KeyError):
        table.find(wanted)


def test_render_empty(table):
    rows = table.render().splitlines()
    assert len(rows) == SIZE
    assert all(row.endswith(": Empty") for row in rows)


def test_render_chain(table):
    table.set("ab", 1)
    table.set("ba", 2)
    rows = table.render().splitlines()
    slot = hash_key("ab")
    assert rows[slot] == f"{slot}: ab: 1 | ba: 2"
    assert rows[0] == "0: Empty"
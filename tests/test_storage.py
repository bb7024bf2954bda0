import logging

import pytest

from belanja.inventory import Inventory, Item
from belanja.storage import (
    format_item,
    load_items,
    load_users,
    parse_item,
    save_items,
    save_users,
)
from belanja.users import UserTable
from belanja.validation import InputError


def test_parse_item_reads_all_fields():
    assert parse_item("4,Buku Tulis,12,3500.5") == Item(4, "Buku Tulis", 12, 3500.5)


def test_parse_item_price_takes_rest_of_line():
    item = parse_item("1,Pena,2,3,4")
    assert item.price == 3.0
    assert item.name == "Pena"


@pytest.mark.parametrize("line", ["", "1", "1,Pena", "1,Pena,2", "1,Pena,2,", ",Pena,2,3"])
def test_parse_item_missing_field(line):
    with pytest.raises(InputError, match="Format data barang salah"):
        parse_item(line)


def test_parse_item_bad_number():
    with pytest.raises(ValueError):
        parse_item("abc,Pena,2,3")
    with pytest.raises(ValueError):
        parse_item("1,Pena,2,harga")


def test_format_item_uses_general_notation():
    assert format_item(Item(1, "Buku", 5, 12500.0)) == "1,Buku,5,12500"
    assert format_item(Item(2, "Pena", 1, 2.5)) == "2,Pena,1,2.5"


def test_format_then_parse_round_trip():
    item = Item(9, "Tas Sekolah", 3, 150000.0)
    assert parse_item(format_item(item)) == item


def test_save_and_load_items_round_trip(tmp_path):
    path = tmp_path / "barang.txt"
    items = [Item(3, "Pena", 4, 2500.0), Item(1, "Buku", 20, 5000.0), Item(2, "Tas", 7, 90000.0)]
    save_items(Inventory(items), path)
    loaded = load_items(path)
    assert list(loaded) == sorted(items, key=lambda item: item.id)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == format_item(Item(1, "Buku", 20, 5000.0))
    assert len(lines) == 3


def test_load_items_skips_bad_lines(tmp_path, caplog):
    path = tmp_path / "barang.txt"
    path.write_text("1,Buku,5,100\nrusak\n\n2,Pena,x,1\n3,Tas,2,50\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        inventory = load_items(path)
    assert [item.id for item in inventory] == [1, 3]
    assert "Abaikan baris: rusak" in caplog.text


def test_load_items_ignores_duplicate_id(tmp_path):
    path = tmp_path / "barang.txt"
    path.write_text("1,Buku,5,100\n1,Lain,9,200\n", encoding="utf-8")
    inventory = load_items(path)
    assert len(inventory) == 1
    assert inventory.find(1).name == "Buku"


def test_load_items_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_items(tmp_path / "tidak_ada.txt")


def test_save_and_load_users_round_trip(tmp_path):
    path = tmp_path / "user.txt"
    users = UserTable({"andi": "password", "budi": "secret"})
    save_users(users, path)
    loaded = UserTable()
    load_users(loaded, path)
    assert dict(loaded.items()) == {"andi": "password", "budi": "secret"}


def test_load_users_skips_broken_lines(tmp_path, caplog):
    path = tmp_path / "user.txt"
    path.write_text("andi,password\ntanpakoma\n,secret\nbudi,\n", encoding="utf-8")
    users = UserTable()
    with caplog.at_level(logging.WARNING):
        load_users(users, path)
    assert list(users) == ["andi"]
    assert "tanpakoma" in caplog.text


def test_load_users_replaces_existing(tmp_path):
    path = tmp_path / "user.txt"
    path.write_text("andi,token\n", encoding="utf-8")
    users = UserTable({"andi": "password"})
    load_users(users, path)
    assert users.verify("andi", "token") is True


def test_load_users_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_users(UserTable(), tmp_path / "tidak_ada.txt")
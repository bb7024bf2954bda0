import io
import sys

import pytest

from belanja.cli import main
from belanja.storage import load_items


@pytest.fixture
def data_files(tmp_path):
    items = tmp_path / "barang.txt"
    users = tmp_path / "user.txt"
    items.write_text("1,Buku Tulis,20,5000\n2,Pensil,5,1500\n", encoding="utf-8")
    users.write_text("alice,password\n", encoding="utf-8")
    return items, users


def run_main(monkeypatch, data_files, text):
    items, users = data_files
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main(["--items", str(items), "--users", str(users)])


def test_missing_files_fail(tmp_path, capsys):
    missing = tmp_path / "nothing.txt"
    status = main(["--items", str(missing), "--users", str(missing)])
    assert status == 1
    assert "Gagal memuat data" in capsys.readouterr().err


def test_exit_saves_data(monkeypatch, capsys, data_files):
    items, users = data_files
    items.write_text("2,Pensil,5,1500\n1,Buku Tulis,20,5000\n", encoding="utf-8")
    assert run_main(monkeypatch, data_files, "3\n") == 0
    assert "Data disimpan. Terima kasih!" in capsys.readouterr().out
    assert items.read_text(encoding="utf-8") == "1,Buku Tulis,20,5000\n2,Pensil,5,1500\n"
    assert users.read_text(encoding="utf-8") == "alice,password\n"


def test_invalid_choice_and_bad_input(monkeypatch, capsys, data_files):
    assert run_main(monkeypatch, data_files, "9\nabc\n3\n") == 0
    captured = capsys.readouterr()
    assert "Pilihan tidak valid." in captured.out
    assert "Input error: Input bukan angka yang valid." in captured.err


def test_end_of_input_stops(monkeypatch, capsys, data_files):
    items, _ = data_files
    before = items.read_text(encoding="utf-8")
    assert run_main(monkeypatch, data_files, "") == 0
    assert "MENU UTAMA" in capsys.readouterr().out
    assert items.read_text(encoding="utf-8") == before


def test_seller_mode_adds_item(monkeypatch, capsys, data_files):
    items, _ = data_files
    text = "1\n2\n7\nPenghapus\n30\n2500\n7\n3\n"
    assert run_main(monkeypatch, data_files, text) == 0
    assert "Barang berhasil ditambahkan." in capsys.readouterr().out
    saved = load_items(items)
    assert [item.id for item in saved] == [1, 2, 7]
    assert saved.find(7).name == "Penghapus"


def test_buyer_mode_registers_user(monkeypatch, capsys, data_files):
    _, users = data_files
    text = "2\n2\nbob\npassword\n0\n3\n"
    assert run_main(monkeypatch, data_files, text) == 0
    assert "Registrasi berhasil." in capsys.readouterr().out
    lines = users.read_text(encoding="utf-8").splitlines()
    assert sorted(lines) == ["alice,password", "bob,password"]


def test_buyer_checkout_persists_stock(monkeypatch, capsys, data_files):
    items, _ = data_files
    text = "2\n1\nalice\npassword\n3\n1\n4\n4\ny\nJakarta\nBandung\ny\n0\n0\n3\n"
    assert run_main(monkeypatch, data_files, text) == 0
    assert "Checkout berhasil." in capsys.readouterr().out
    assert load_items(items).find(1).stock == 20 - 4
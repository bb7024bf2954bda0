"""Interactive console for managing the item catalogue."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from .catalog import format_item_table, sort_by_name, sort_by_stock
from .inventory import Inventory, Item
from .storage import PathLike, _parse_float, save_items
from .validation import is_low_stock, parse_int

_BOLD = "\033[1;97m"
_RESET = "\033[0m"
_CYAN = "\033[1;36m"
_LOW_BORDER = "+------+----------------------+--------+"

_MENU = (
    "1. Tampilkan semua barang",
    "2. Tambah barang",
    "3. Edit barang",
    "4. Hapus barang",
    "5. Urutkan & tampilkan barang",
    "6. Barang stok rendah",
    "7. Simpan dan keluar",
)


class SellerConsole:
    """Menu-driven seller mode working on an inventory and its data file."""

    def __init__(
        self,
        inventory: Inventory,
        path: PathLike,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.inventory = inventory
        self.path = path
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _draw_menu(self) -> None:
        border = "+====================================+"
        self._write(f"{_CYAN}\n{border}\n")
        self._write(f"{_CYAN}|\033[1;37m         == MENU PENJUAL ==         {_CYAN}|\n")
        self._write(f"{_CYAN}{border}{_RESET}\n")
        for entry in _MENU:
            self._write(f"{_CYAN}|{_RESET} {entry:<35}{_CYAN}|{_RESET}\n")
        self._write(f"{_CYAN}{border}{_RESET}\n")

    def run(self) -> None:
        """Show the menu until the user saves and leaves; stop quietly at end of input."""
        actions: dict[str, Callable[[], object]] = {
            "1": self.show_all,
            "2": self.add_item,
            "3": self.edit_item,
            "4": self.delete_item,
            "5": self.show_sorted,
            "6": self.show_low_stock,
        }
        try:
            while True:
                self._draw_menu()
                choice = self._ask("\033[1;33m> Pilihan: \033[0m")
                try:
                    if choice == "7":
                        save_items(self.inventory, self.path)
                        self._write("\033[92mData berhasil disimpan.\033[0m\n")
                        return
                    action = actions.get(choice)
                    if action is None:
                        self._write("\033[91mPilihan tidak valid.\033[0m\n")
                    else:
                        action()
                except (ValueError, OSError) as exc:
                    self._write(f"\033[91mTerjadi kesalahan: {exc}\033[0m\n")
        except EOFError:
            return

    def show_all(self) -> list[Item]:
        """Print every item in id order and return them."""
        items = list(self.inventory)
        self._write(format_item_table(items, "Daftar Barang"))
        return items

    def show_sorted(self) -> Optional[list[Item]]:
        """Ask for a sort order, print the sorted items and return them."""
        choice = self._ask(
            "\n\033[93mUrut berdasarkan:\033[0m\n1. Nama (A-Z)\n2. Stok (terbesar)\nPilihan:\033[0m "
        )
        if choice == "1":
            items = sort_by_name(self.inventory)
        elif choice == "2":
            items = sort_by_stock(self.inventory)
        else:
            self._write("\033[31mPilihan tidak valid. Kembali ke menu.\033[0m\n")
            return None
        self._write("\n" + format_item_table(items, "Barang Terurut"))
        return items

    def show_low_stock(self) -> list[Item]:
        """Print and return items whose stock is below the critical level."""
        items = [item for item in self.inventory if is_low_stock(item.stock)]
        if not items:
            self._write("\033[91mTidak ada barang dengan stok rendah.\033[0m\n")
            return items
        lines = [
            f"\n{_BOLD}== Barang dengan Stok Rendah =={_RESET}",
            _LOW_BORDER,
            f"| {_BOLD}ID{_RESET}   | {_BOLD}Nama Barang{_RESET}          | {_BOLD}Stok{_RESET}   |",
            _LOW_BORDER,
        ]
        lines.extend(f"| {item.id:>4} | {item.name:<20} | {item.stock:>6} |" for item in items)
        lines.append(_LOW_BORDER)
        lines.append(f"\033[93mTotal barang dengan stok rendah:\033[0m {len(items)}")
        self._write("\n".join(lines) + "\n")
        return items

    def add_item(self) -> bool:
        """Ask for a new item and insert it; return False if the id is taken."""
        self._write("\n\033[93m== Tambah Barang Baru ==\033[0m\n")
        item_id = parse_int(self._ask("ID: "))
        name = self._ask("Nama: ")
        stock = parse_int(self._ask("Stok: "))
        price = _parse_float(self._ask("Harga: "))
        if item_id in self.inventory:
            self._write("\033[91mID sudah ada. Gagal tambah.\033[0m\n")
            return False
        self.inventory.insert(Item(item_id, name, stock, price))
        self._write("\033[92mBarang berhasil ditambahkan.\033[0m\n")
        return True

    def edit_item(self) -> bool:
        """Edit an item in place; blank answers keep the current value."""
        self._write("\n\033[93m== Edit Barang ==\033[0m\n")
        if not len(self.inventory):
            self._write("\033[91mTidak ada barang untuk diedit.\033[0m\n")
            return False
        item_id = parse_int(self._ask("Masukkan ID barang yang ingin diedit: "))
        item = self.inventory.find(item_id)
        if item is None:
            self._write(f"\033[91mBarang dengan ID {item_id} tidak ditemukan.\033[0m\n")
            return False
        answer = self._ask(f"Edit nama ({item.name}): ")
        if answer:
            item.name = answer
        answer = self._ask(f"Edit stok ({item.stock}): ")
        if answer:
            item.stock = parse_int(answer)
        answer = self._ask(f"Edit harga ({format(item.price, 'g')}): ")
        if answer:
            item.price = _parse_float(answer)
        self._write("\033[92mBarang berhasil diedit.\033[0m\n")
        return True

    def delete_item(self) -> bool:
        """Ask for an id and remove that item; return whether one was removed."""
        self._write("\n\033[93m== Hapus Barang ==\033[0m\n")
        if not len(self.inventory):
            self._write("\033[91mTidak ada barang untuk dihapus.\033[0m\n")
            return False
        item_id = parse_int(self._ask("Masukkan ID barang yang ingin dihapus: "))
        if item_id not in self.inventory:
            self._write(f"\033[91mBarang dengan ID {item_id} tidak ditemukan.\033[0m\n")
            return False
        self.inventory.remove(item_id)
        self._write("\033[92mBarang berhasil dihapus.\033[0m\n")
        return True
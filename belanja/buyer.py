"""Shopping cart and the interactive buyer console."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, TextIO

from .catalog import format_item_table
from .inventory import Inventory, Item
from .network import RouteNetwork
from .storage import PathLike, save_items, save_users
from .users import UserError, UserTable
from .validation import InputError, is_valid_username, parse_int

SHIPPING_COST_PER_HOP = 10000

_BOLD = "\033[1;97m"
_RESET = "\033[0m"
_CYAN = "\033[1;36m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_PROMPT = "\033[1;33mPilihan: \033[0m"
_CART_BORDER = "+----------------------+--------+---------------+------------+"

_START_MENU = ("1. Login", "2. Daftar (Registrasi)", "0. Keluar")
_SHOP_MENU = (
    "1. Lihat semua barang",
    "2. Cari barang",
    "3. Tambah barang ke keranjang",
    "4. Lihat keranjang dan checkout",
    "0. Logout",
)


@dataclass
class CartItem:
    """An item snapshot and the quantity ordered."""

    item: Item
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.item.price * self.quantity


class Cart:
    """Items a buyer intends to purchase, one entry per item id."""

    def __init__(self) -> None:
        self._entries: list[CartItem] = []

    def add(self, item: Item, quantity: int) -> None:
        """Add a quantity of an item, merging with an existing entry for the same id."""
        if item.stock < quantity:
            raise InputError("Stok barang tidak cukup.")
        for entry in self._entries:
            if entry.item.id == item.id:
                entry.quantity += quantity
                return
        self._entries.append(CartItem(replace(item), quantity))

    def total(self) -> float:
        """Sum of every entry's price times quantity."""
        return sum(entry.subtotal for entry in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def search_items(items: Iterable[Item], keyword: str) -> list[Item]:
    """Items whose name contains the keyword, ignoring case."""
    needle = keyword.lower()
    return [item for item in items if needle in item.name.lower()]


def default_network() -> RouteNetwork:
    """The delivery network between the supported cities."""
    network = RouteNetwork()
    for source, target in (
        ("Jakarta", "Bandung"),
        ("Bandung", "Yogyakarta"),
        ("Yogyakarta", "Surabaya"),
        ("Jakarta", "Semarang"),
        ("Semarang", "Surabaya"),
    ):
        network.connect(source, target)
    return network


def format_cart(cart: Cart) -> str:
    """Render the cart as a table with its total, or a note that it is empty."""
    if not len(cart):
        return "Keranjang kosong.\n"
    header = (
        f"| {_BOLD}Nama Barang{_RESET}          | {_BOLD}Jumlah{_RESET} "
        f"| {_BOLD}Harga Satuan{_RESET}   | {_BOLD}Subtotal{_RESET}   |"
    )
    lines = [f"{_BOLD}== Keranjang Anda =={_RESET}", _CART_BORDER, header, _CART_BORDER]
    lines.extend(
        f"| {entry.item.name:<20} | {entry.quantity:>6} "
        f"| {entry.item.price:>13.2f} | {entry.subtotal:>10.2f} |"
        for entry in cart
    )
    lines.append(_CART_BORDER)
    lines.append(f"Total Harga: \033[1;92m{cart.total():.2f}{_RESET}")
    return "\n".join(lines) + "\n"


def _error_text(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


class BuyerConsole:
    """Menu-driven buyer mode: registration, login, shopping and checkout."""

    def __init__(
        self,
        users: UserTable,
        inventory: Inventory,
        users_path: PathLike,
        inventory_path: PathLike,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.users = users
        self.inventory = inventory
        self.users_path = users_path
        self.inventory_path = inventory_path
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

    def _draw_box(self, border: str, title: str, entries: Iterable[str]) -> None:
        width = len(border) - 3
        self._write(f"{_CYAN}\n{border}\n")
        self._write(f"{_CYAN}|\033[1;37m{title}{_CYAN}|\n")
        self._write(f"{_CYAN}{border}{_RESET}\n")
        for entry in entries:
            self._write(f"{_CYAN}|{_RESET} {entry:<{width}}{_CYAN}|{_RESET}\n")
        self._write(f"{_CYAN}{border}{_RESET}\n")

    def run(self) -> None:
        """Offer login or registration until the buyer leaves or input ends."""
        border = "+=============================================+"
        try:
            while True:
                self._draw_box(border, "   Selamat Datang di Sistem Belanja Online   ", _START_MENU)
                choice = self._ask(_PROMPT)
                if choice == "1":
                    self.shop()
                elif choice == "2":
                    self.register()
                elif choice == "0":
                    self._write(f"{_GREEN}Kembali ke menu utama.{_RESET}\n")
                    return
                else:
                    self._write(f"{_RED}Pilihan tidak valid.{_RESET}\n")
        except EOFError:
            return

    def login(self) -> Optional[str]:
        """Ask for credentials; return the username on success, else None."""
        self._write("=== Login Pembeli ===\n")
        username = self._ask("Username: ")
        given = self._ask("Password: ")
        try:
            self.users.verify(username, given)
        except UserError as exc:
            self._write(f"Login gagal: {exc}\n")
            return None
        self._write("Login berhasil.\n")
        return username

    def register(self) -> bool:
        """Ask for a new account, store it and save the user file."""
        self._write("=== Registrasi Pengguna Baru ===\n")
        username = self._ask("Username baru: ")
        if not is_valid_username(username):
            self._write(
                "Username tidak valid. Harus minimal 3 karakter dan hanya huruf/angka.\n"
            )
            return False
        given = self._ask("Password: ")
        try:
            self.users.register(username, given)
            save_users(self.users, self.users_path)
        except (UserError, OSError) as exc:
            self._write(f"Registrasi gagal: {exc}\n")
            return False
        self._write("Registrasi berhasil. Silakan login.\n")
        return True

    def shop(self) -> None:
        """Log in, then browse, fill a cart and check out until logout."""
        try:
            if self.login() is None:
                self._write(f"\033[91mGagal login. Kembali ke menu utama.{_RESET}\n")
                return
            cart = Cart()
            border = "+===================================+"
            while True:
                self._draw_box(border, "           MENU PEMBELI            ", _SHOP_MENU)
                answer = self._ask(_PROMPT)
                try:
                    choice = parse_int(answer)
                    if choice == 0:
                        self._write(f"{_GREEN}Logout berhasil.{_RESET}\n")
                        return
                    if choice == 1:
                        self._write(format_item_table(self.inventory, "Daftar Barang"))
                    elif choice == 2:
                        self._search()
                    elif choice == 3:
                        self._add_to_cart(cart)
                    elif choice == 4:
                        if not self.checkout(cart):
                            return
                    else:
                        self._write("Pilihan tidak valid.\n")
                except (ValueError, KeyError, OSError) as exc:
                    self._write(f"{_RED}Error: {_error_text(exc)}{_RESET}\n")
        except EOFError:
            return

    def _search(self) -> None:
        keyword = self._ask("Masukkan kata kunci pencarian: ")
        found = search_items(self.inventory, keyword)
        if found:
            self._write(format_item_table(found, "Daftar Barang"))
        else:
            self._write(f"{_RED}Barang tidak ditemukan.{_RESET}\n")

    def _add_to_cart(self, cart: Cart) -> None:
        item_id = parse_int(self._ask("Masukkan ID barang yang ingin ditambahkan: "))
        item = self.inventory.find(item_id)
        if item is None:
            raise InputError("Barang dengan ID tersebut tidak ditemukan.")
        quantity = parse_int(self._ask("Masukkan jumlah: "))
        if quantity <= 0:
            raise InputError("Jumlah harus positif.")
        cart.add(item, quantity)
        self._write(f"{_GREEN}Berhasil menambahkan ke keranjang.{_RESET}\n")

    def _trace(self, label: str, start: str, order: list[str]) -> None:
        self._write(f"\033[1;34mSimulasi penelusuran ({label}): {_RESET}\n")
        self._write(f"{label} dari lokasi: {start}\n")
        self._write("".join(f"{city} " for city in order) + "\n")

    def checkout(self, cart: Cart) -> bool:
        """Show the cart and optionally place the order.

        Returns False when the buyer leaves the shop: the destination cannot be
        reached or the shipping cost is declined. Otherwise returns True.
        """
        self._write(format_cart(cart))
        if self._ask("Checkout? (y/n): ") not in ("y", "Y"):
            return True
        if not len(cart):
            self._write(f"{_RED}Keranjang kosong, tidak bisa checkout.{_RESET}\n")
            return True

        network = default_network()
        origin = self._ask("Masukkan kota asal pengiriman: ")
        destination = self._ask("Masukkan kota tujuan pengiriman: ")
        self._trace("DFS", origin, network.dfs(origin))
        self._trace("BFS", origin, network.bfs(origin))

        hops = network.shortest_hops(origin, destination)
        if hops is None:
            self._write(
                f"{_RED}Tujuan tidak terjangkau dari {origin}. Pengiriman dibatalkan.{_RESET}\n"
            )
            return False

        cost = hops * SHIPPING_COST_PER_HOP
        self._write(f"Estimasi pengiriman: {hops} kota\n")
        self._write(f"{_GREEN}Biaya kirim: Rp{cost}{_RESET}\n")
        confirm = self._ask(f"Lanjutkan Checkout dengan ongkir Rp{cost}? (y/n): ")
        if confirm not in ("y", "Y"):
            self._write(f"\033[91mCheckout dibatalkan.{_RESET}\n")
            return False

        for entry in cart:
            stored = self.inventory.find(entry.item.id)
            if stored is None:
                continue
            if stored.stock >= entry.quantity:
                stored.stock -= entry.quantity
            else:
                self._write(f"Stok barang {stored.name} tidak cukup saat checkout.\n")
        save_items(self.inventory, self.inventory_path)
        self._write(f"{_GREEN}Checkout berhasil. Terima kasih telah berbelanja!{_RESET}\n")
        cart.clear()
        return True
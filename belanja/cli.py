"""Command-line entry point with the main menu."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .buyer import BuyerConsole
from .seller import SellerConsole
from .storage import load_items, load_users, save_items, save_users
from .users import UserTable
from .validation import parse_int

DEFAULT_ITEMS_PATH = "data/barang.txt"
DEFAULT_USERS_PATH = "data/user.txt"

_BOX = "\033[1;97m"
_RESET = "\033[0m"
_BORDER = "+==============================+"
_MENU = ("1. Mode Penjual", "2. Mode Pembeli", "3. Keluar")


def _draw_menu() -> None:
    out = sys.stdout
    out.write(f"\n{_BOX}{_BORDER}{_RESET}\n")
    out.write(f"{_BOX}|         MENU UTAMA           |{_RESET}\n")
    out.write(f"{_BOX}{_BORDER}{_RESET}\n")
    for entry in _MENU:
        out.write(f"{_BOX}| {entry:<29}|{_RESET}\n")
    out.write(f"{_BOX}{_BORDER}{_RESET}\n")
    out.write(f"Pilih opsi: {_RESET}")
    out.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the data files and run the main menu; return the exit status."""
    parser = argparse.ArgumentParser(prog="belanja", description="Toko belanja online.")
    parser.add_argument("--items", default=DEFAULT_ITEMS_PATH, help="file data barang")
    parser.add_argument("--users", default=DEFAULT_USERS_PATH, help="file data user")
    args = parser.parse_args(argv)

    try:
        inventory = load_items(args.items)
        users = UserTable()
        load_users(users, args.users)
    except OSError as exc:
        name = exc.filename if exc.filename is not None else exc
        print(f"Gagal memuat data: Gagal membuka file: {name}", file=sys.stderr)
        return 1

    while True:
        _draw_menu()
        line = sys.stdin.readline()
        if not line:
            return 0
        try:
            choice = parse_int(line.rstrip("\n"))
            if choice == 1:
                SellerConsole(inventory, args.items).run()
            elif choice == 2:
                BuyerConsole(users, inventory, args.users, args.items).run()
            elif choice == 3:
                save_items(inventory, args.items)
                save_users(users, args.users)
                print("Data disimpan. Terima kasih!")
                return 0
            else:
                print("\033[91mPilihan tidak valid.")
        except (ValueError, OSError) as exc:
            print(f"\033[91mInput error: {exc}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
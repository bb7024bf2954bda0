"""Sorting, searching and tabulating lists of items."""

from __future__ import annotations

from typing import Iterable, Optional

from .inventory import Item
from .validation import is_low_stock

_BOLD = "\033[1;97m"
_RESET = "\033[0m"
_BORDER = "+------+----------------------+--------+--------+"


def sort_by_name(items: Iterable[Item]) -> list[Item]:
    """Items ordered by name, ignoring case."""
    return sorted(items, key=lambda item: item.name.lower())


def sort_by_stock(items: Iterable[Item]) -> list[Item]:
    """Items ordered from largest stock to smallest."""
    return sorted(items, key=lambda item: item.stock, reverse=True)


def find_by_name(items: Iterable[Item], name: str) -> Optional[Item]:
    """First item whose name matches exactly, or None."""
    return next((item for item in items if item.name == name), None)


def count_low_stock(items: Iterable[Item]) -> int:
    return sum(1 for item in items if is_low_stock(item.stock))


def format_item_table(items: Iterable[Item], title: str = "Daftar Barang") -> str:
    """Render items as a text table with a bold title."""
    header = (
        f"| {_BOLD}ID{_RESET}   | {_BOLD}Nama Barang{_RESET}          "
        f"| {_BOLD}Stok{_RESET}    | {_BOLD}Harga{_RESET} |"
    )
    lines = [f"{_BOLD}== {title} =={_RESET}", _BORDER, header, _BORDER]
    lines.extend(
        f"| {item.id:>4} | {item.name:<20} | {item.stock:>6} | {format(item.price, 'g'):>6} |"
        for item in items
    )
    lines.append(_BORDER)
    return "\n".join(lines) + "\n"
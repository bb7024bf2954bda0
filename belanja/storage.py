"""Reading and writing item and user data files."""

from __future__ import annotations

import logging
import math
import os
import re
from typing import Iterable, Union

from .inventory import Inventory, Item
from .users import UserTable
from .validation import InputError, parse_int

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Read a leading floating-point number, ignoring leading whitespace and trailing text."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise InputError("Input bukan angka yang valid.")
    token = match.group(1)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise InputError("Angka terlalu besar atau kecil.")
    return value


def parse_item(line: str) -> Item:
    """Parse one ``id,name,stock,price`` record; the price takes the rest of the line."""
    id_text, _, rest = line.partition(",")
    name, _, rest = rest.partition(",")
    stock_text, _, price_text = rest.partition(",")
    if not (id_text and name and stock_text and price_text):
        raise InputError(f"Format data barang salah: {line}")
    return Item(
        id=parse_int(id_text),
        name=name,
        stock=parse_int(stock_text),
        price=_parse_float(price_text),
    )


def format_item(item: Item) -> str:
    """Render an item as one record line, without the newline."""
    return f"{item.id},{item.name},{item.stock},{format(item.price, 'g')}"


def save_items(inventory: Iterable[Item], path: PathLike) -> None:
    """Write every item, in id order, one record per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for item in inventory:
            handle.write(format_item(item) + "\n")


def load_items(path: PathLike) -> Inventory:
    """Read items from a file, skipping and logging malformed lines."""
    inventory = Inventory()
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            try:
                inventory.insert(parse_item(line))
            except ValueError as exc:
                logger.warning("[Barang] Abaikan baris: %s, karena: %s", line, exc)
    return inventory


def save_users(users: UserTable, path: PathLike) -> None:
    """Write every ``username,password`` pair, one per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for username, stored in users.items():
            handle.write(f"{username},{stored}\n")


def load_users(users: UserTable, path: PathLike) -> None:
    """Add users read from a file to the table, skipping and logging broken lines."""
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            fields = line.partition(",")
            username, stored = fields[0], fields[2]
            if username and stored:
                users.set(username, stored)
            else:
                logger.warning("[User] Abaikan baris kosong atau rusak: %s", line)
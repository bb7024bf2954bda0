"""Terminal shop with an AVL-backed inventory, user accounts, cart and shipping estimates."""

__version__ = "0.1.0"

__all__ = [
    "buyer",
    "catalog",
    "cli",
    "inventory",
    "network",
    "seller",
    "storage",
    "users",
    "validation",
]
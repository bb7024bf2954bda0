# belanja

A small online-shop system that runs in the terminal, with its menus and
messages in Indonesian. It has two modes:

- **Seller mode** (*Mode Penjual*): list, add, edit and delete items, sort
  them by name (A–Z, ignoring case) or by stock (largest first), and show
  items whose stock is low (fewer than 10 units).
- **Buyer mode** (*Mode Pembeli*): register and log in, browse and search
  items by name, fill a cart and check out. Shipping cost is estimated from
  the number of hops between origin and destination on a small city network
  (Jakarta, Bandung, Yogyakarta, Semarang, Surabaya), at Rp10000 per hop.
  Checking out lowers the stock of the bought items and saves the item file.

Items are kept in a balanced (AVL) tree keyed by item id; users in a table
keyed by username. Both are read from plain comma-separated text files at
start.

## Installation

```
pip install .
```

## Running

```
belanja
belanja --items path/to/barang.txt --users path/to/user.txt
```

`--items` defaults to `data/barang.txt` and `--users` to `data/user.txt`,
relative to the current directory. Both files must already exist; if either
cannot be opened the command prints an error and exits with status 1.

The main menu offers seller mode (1), buyer mode (2) and exit (3). Exit
writes both data files back before quitting. Seller mode saves the item file
when you choose "Simpan dan keluar"; registering a new buyer saves the user
file straight away. End of input leaves a menu without saving.

## Data files

- Items: one `id,name,stock,price` record per line, e.g. `1,Pensil,25,2500`.
  The price takes the rest of the line.
- Users: one `username,password` pair per line.

Malformed lines are skipped and reported through the `belanja.storage`
logger.

## Using the library

```python
from belanja.buyer import Cart, default_network, search_items
from belanja.inventory import Inventory, Item
from belanja.users import UserError, UserTable

network = default_network()
print(network.shortest_hops("Jakarta", "Surabaya"))  # 2
print(network.bfs("Jakarta"))

inventory = Inventory([Item(2, "Buku", 5, 15000.0), Item(1, "Pensil", 25, 2500.0)])
print([item.id for item in inventory])  # [1, 2]

cart = Cart()
cart.add(inventory.find(1), 3)
print(cart.total())  # 7500.0

users = UserTable({})
password = "password"
users.register("alice", password)
users.verify("alice", password)      # True
try:
    users.register("alice", password)
except UserError as exc:
    print(exc)                       # Username sudah terdaftar.
```

Modules:

- `belanja.inventory` — `Item` and the AVL-backed `Inventory`
  (`insert`, `remove`, `find`, `height`, iteration in id order).
- `belanja.users` — `UserTable` (`register`, `verify`, `set`) and `UserError`.
- `belanja.validation` — `parse_int`, `safe_divide`, `is_number`, `split`,
  `is_valid_username`, `is_low_stock` and `InputError`.
- `belanja.network` — `RouteNetwork` with `connect`, `neighbours`, `bfs`,
  `dfs` and `shortest_hops`.
- `belanja.catalog` — `sort_by_name`, `sort_by_stock`, `find_by_name`,
  `count_low_stock` and `format_item_table`.
- `belanja.storage` — `parse_item`, `format_item`, `save_items`,
  `load_items`, `save_users`, `load_users`.
- `belanja.seller` — `SellerConsole`; `belanja.buyer` — `Cart`, `CartItem`,
  `search_items`, `default_network`, `format_cart` and `BuyerConsole`. Both
  consoles take optional `stdin` and `stdout` streams.
- `belanja.cli` — `main`, the `belanja` command.

## What it does not do

Passwords are stored and compared as plain text, and there is no payment
step: checkout only lowers stock and saves the item file. The city network
is fixed in `default_network()`.

## Tests

```
pip install .[test]
pytest
```
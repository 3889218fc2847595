# donhangkho

A small interactive console tool for keeping a product catalogue with stock
levels and the customer orders placed against it. The menus and messages are
in Vietnamese (without diacritics).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The main program

```
donhangkho
```

On start it reads `sanpham.dat` (products) and `donhang.dat` (orders) from the
current directory; a missing file counts as an empty list. If a file is
malformed, an error is printed to standard error and the command exits with
status 1.

It then shows a numbered menu:

1. Add a product (code, name, price, quantity in stock).
2. Edit a product: every field, including the code, is replaced.
3. Remove a product. A product that appears in any order cannot be removed.
4. Create an order (order code, customer name, date, then product lines).
   A line is accepted only if the product exists and there is enough stock;
   the stock is reduced by the ordered quantity.
5. Edit an order:
   - `a` add a product line (no stock check; stock is reduced),
   - `b` change a line's quantity (the difference is taken from or returned
     to stock),
   - `c` remove a line (its quantity is returned to stock),
   - `d` leave the submenu.
6. Remove an order (stock is not returned).
7. List products.
8. List orders, with each line's product name looked up in the catalogue
   (`---` when the product no longer exists).
9. Quit.

After each of the actions 1 to 6 the affected lists are written back to the
two files: products after 1–5, orders after 4–6. The program also ends when
input runs out.

## The simple variant

```
donhangkho-simple
```

A lighter menu that keeps products (code, name, price) and orders (code,
customer, product lines with quantities) in memory. Products listed in an
order cannot be removed. Editing an order adds, changes or removes lines
without any stock bookkeeping.

## File format

Both data files use little-endian 32-bit signed integers for counts, lengths
and quantities, UTF-8 strings preceded by their byte length, and
little-endian 64-bit floats for prices.

- Products: count, then for each product: code, name, price, quantity.
- Orders: count, then for each order: code, customer, date, number of lines,
  then for each line: product code, quantity.

Trailing bytes after the last record are ignored.

## Using it from Python

- `donhangkho.models` — the dataclasses `Product`, `OrderLine` and `Order`
  (with `add_line`, `find_line`, `remove_line`, `contains`, `summary`,
  `detail`), and `product_in_orders`.
- `donhangkho.storage` — `encode_products` / `decode_products`,
  `encode_orders` / `decode_orders`, and the file helpers `save_products`,
  `load_products`, `save_orders`, `load_orders`. Malformed data raises
  `CorruptDataError` (a `ValueError`).
- `donhangkho.inventory` — `Inventory`, which applies the stock rules and
  raises `NotFoundError`, `InsufficientStockError` or `ProductInUseError`
  (all subclasses of `InventoryError`). `product_table` and `order_report`
  render the listings as text.
- `donhangkho.cli` — `App`, the menu driver behind `donhangkho`. It takes an
  `Inventory` and optional `prompt` and `write` callables (defaulting to
  `input` and `print`); `App` itself keeps changes in memory only.
- `donhangkho.simple` — `SimpleSystem` and `run(system, prompt, write)`,
  behind `donhangkho-simple`.

```python
from donhangkho.inventory import Inventory
from donhangkho.models import Order, Product

inv = Inventory()
inv.add_product(Product("P1", "Pen", 5000, 10))
order = Order("D1", "An", "01/01/2024")
inv.add_to_order(order, "P1", 3)
inv.add_order(order)
print(inv.find_product("P1").quantity)  # 7
```

## What it does not do

- `donhangkho-simple` saves nothing: its products and orders are lost when
  it exits, and it does not read the data files of the main program.
- Neither program tracks prices on orders or computes order totals.
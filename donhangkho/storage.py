"""Binary files holding the product list and the order list.

Every count, length and quantity is a little-endian 32-bit signed integer,
strings are UTF-8 bytes preceded by their length, and prices are
little-endian 64-bit floats.
"""

from __future__ import annotations

import io
import struct
from collections.abc import Iterable
from pathlib import Path

from donhangkho.models import Order, OrderLine, Product

PRODUCTS_FILE = "sanpham.dat"
ORDERS_FILE = "donhang.dat"

_INT = struct.Struct("<i")
_DOUBLE = struct.Struct("<d")


class CorruptDataError(ValueError):
    """The data does not follow the file format."""


class _Writer:
    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def int(self, value: int) -> None:
        try:
            self._buffer.write(_INT.pack(value))
        except struct.error as exc:
            raise ValueError(f"integer out of range: {value!r}") from exc

    def double(self, value: float) -> None:
        self._buffer.write(_DOUBLE.pack(value))

    def string(self, value: str) -> None:
        raw = value.encode("utf-8")
        self.int(len(raw))
        self._buffer.write(raw)

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._offset = 0

    def _take(self, size: int) -> memoryview:
        end = self._offset + size
        if end > len(self._data):
            raise CorruptDataError(
                f"unexpected end of data at byte {self._offset}, needed {size} more"
            )
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def count(self) -> int:
        value = self.int()
        if value < 0:
            raise CorruptDataError(f"negative count or length: {value}")
        return value

    def double(self) -> float:
        return _DOUBLE.unpack(self._take(_DOUBLE.size))[0]

    def string(self) -> str:
        raw = self._take(self.count())
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptDataError("string is not valid UTF-8") from exc


def encode_products(products: Iterable[Product]) -> bytes:
    """Serialise a product list."""
    products = list(products)
    writer = _Writer()
    writer.int(len(products))
    for product in products:
        writer.string(product.code)
        writer.string(product.name)
        writer.double(product.price)
        writer.int(product.quantity)
    return writer.getvalue()


def decode_products(data: bytes) -> list[Product]:
    """Parse a product list; trailing bytes are ignored."""
    reader = _Reader(data)
    products = []
    for _ in range(reader.count()):
        code = reader.string()
        name = reader.string()
        price = reader.double()
        quantity = reader.int()
        products.append(Product(code, name, price, quantity))
    return products


def encode_orders(orders: Iterable[Order]) -> bytes:
    """Serialise an order list with the lines of each order."""
    orders = list(orders)
    writer = _Writer()
    writer.int(len(orders))
    for order in orders:
        writer.string(order.code)
        writer.string(order.customer)
        writer.string(order.date)
        writer.int(len(order.lines))
        for line in order.lines:
            writer.string(line.product_code)
            writer.int(line.quantity)
    return writer.getvalue()


def decode_orders(data: bytes) -> list[Order]:
    """Parse an order list; trailing bytes are ignored."""
    reader = _Reader(data)
    orders = []
    for _ in range(reader.count()):
        order = Order(code=reader.string(), customer=reader.string(), date=reader.string())
        for _ in range(reader.count()):
            product_code = reader.string()
            order.add_line(OrderLine(product_code, reader.int()))
        orders.append(order)
    return orders


def save_products(products: Iterable[Product], path: str | Path = PRODUCTS_FILE) -> None:
    """Write the product list to a file, replacing its contents."""
    Path(path).write_bytes(encode_products(products))


def load_products(path: str | Path = PRODUCTS_FILE) -> list[Product]:
    """Read the product list; a missing file gives an empty list."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return []
    return decode_products(data)


def save_orders(orders: Iterable[Order], path: str | Path = ORDERS_FILE) -> None:
    """Write the order list to a file, replacing its contents."""
    Path(path).write_bytes(encode_orders(orders))


def load_orders(path: str | Path = ORDERS_FILE) -> list[Order]:
    """Read the order list; a missing file gives an empty list."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return []
    return decode_orders(data)
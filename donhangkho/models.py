"""Products, order lines and orders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Product:
    """A product held in stock."""

    code: str = ""
    name: str = ""
    price: float = 0.0
    quantity: int = 0

    def row(self) -> str:
        """One table row: code, name, price and quantity in fixed-width columns."""
        return (
            f"{self.code:<10}{self.name:<20}"
            f"{format(self.price, 'g'):<10}{self.quantity!s:<10}"
        )

    def priced_row(self) -> str:
        """One table row with the price right-aligned to two decimals in VND."""
        return f"{self.code:<15}{self.name:<30}{self.price:>12.2f} VND"


@dataclass
class OrderLine:
    """A quantity of one product within an order."""

    product_code: str = ""
    quantity: int = 0


@dataclass
class Order:
    """A customer order made of order lines."""

    code: str = ""
    customer: str = ""
    date: str = ""
    lines: list[OrderLine] = field(default_factory=list)

    def add_line(self, line: OrderLine) -> None:
        """Append a line to the order."""
        self.lines.append(line)

    def find_line(self, product_code: str) -> OrderLine | None:
        """Return the first line for the product, or None."""
        return next(
            (line for line in self.lines if line.product_code == product_code), None
        )

    def remove_line(self, product_code: str) -> OrderLine:
        """Remove and return the first line for the product.

        Raises KeyError when the order has no such line.
        """
        line = self.find_line(product_code)
        if line is None:
            raise KeyError(product_code)
        self.lines.remove(line)
        return line

    def contains(self, product_code: str) -> bool:
        """Whether any line refers to the product."""
        return self.find_line(product_code) is not None

    def summary(self) -> str:
        """Code, customer, date and the number of lines."""
        return "\n".join(
            [
                f"Ma DH: {self.code}",
                f"Khach hang: {self.customer}",
                f"Ngay: {self.date}",
                f"So san pham: {len(self.lines)}",
            ]
        )

    def detail(self) -> str:
        """A header followed by a table of product codes and quantities."""
        rows = [
            f"Ma DH: {self.code} | Khach hang: {self.customer}",
            f"{'Ma SP':<20}So luong",
            "-" * 30,
        ]
        rows.extend(f"{line.product_code:<20}{line.quantity}" for line in self.lines)
        return "\n".join(rows)


def product_in_orders(product_code: str, orders: Iterable[Order]) -> bool:
    """Whether any of the orders holds a line for the product."""
    return any(order.contains(product_code) for order in orders)
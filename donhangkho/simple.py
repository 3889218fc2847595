"""A smaller order system: priced products and orders kept in memory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from donhangkho.inventory import NotFoundError, ProductInUseError
from donhangkho.models import Order, OrderLine, Product, product_in_orders

_MENU = "\n".join(
    [
        "",
        "=" * 50,
        "  HE THONG QUAN LY DON HANG ",
        "=" * 50,
        "[1] Them san pham         [2] Sua san pham",
        "[3] Xoa san pham          [4] Them don hang",
        "[5] Sua don hang          [6] Xoa don hang",
        "[7] Danh sach san pham    [8] Danh sach don hang",
        "[9] Thoat",
    ]
)

_EDIT_MENU = "\n[a] Them SP   [b] Sua SL   [c] Xoa SP   [d] Thoat"

_INVALID_CHOICE = "Lua chon khong hop le!\n"


class SimpleSystem:
    """Products and orders held in memory, with the rules that bind them."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.orders: list[Order] = []

    def add_product(self, product: Product) -> None:
        """Append a product."""
        self.products.append(product)

    def replace_product(self, code: str, product: Product) -> Product:
        """Replace the first product with the code by a new one; return the new one."""
        for index, existing in enumerate(self.products):
            if existing.code == code:
                self.products[index] = product
                return product
        raise NotFoundError(f"no product with code {code!r}")

    def remove_product(self, code: str) -> Product:
        """Remove and return a product that no order refers to."""
        if product_in_orders(code, self.orders):
            raise ProductInUseError(f"product {code!r} is part of an order")
        for product in self.products:
            if product.code == code:
                self.products.remove(product)
                return product
        raise NotFoundError(f"no product with code {code!r}")

    def add_order(self, order: Order) -> None:
        """Append an order."""
        self.orders.append(order)

    def find_order(self, code: str) -> Order:
        """Return the first order with the code."""
        for order in self.orders:
            if order.code == code:
                return order
        raise NotFoundError(f"no order with code {code!r}")

    def remove_order(self, code: str) -> Order:
        """Remove and return the first order with the code."""
        order = self.find_order(code)
        self.orders.remove(order)
        return order

    def product_listing(self) -> str:
        """The products as a framed table with prices."""
        rows = ["", "=" * 50, f"{'MA SP':<15}{'TEN SP':<30}GIA", "-" * 50]
        if self.products:
            rows.extend(product.priced_row() for product in self.products)
        else:
            rows.append("Chua co san pham nao!")
        rows.extend(["=" * 50, ""])
        return "\n".join(rows)

    def order_listing(self) -> str:
        """Every order with its lines, framed."""
        rows = ["", "=" * 50, "DANH SACH DON HANG", "-" * 50]
        if self.orders:
            for order in self.orders:
                rows.extend(["", order.detail()])
        else:
            rows.append("Chua co don hang nao!")
        rows.extend(["=" * 50, ""])
        return "\n".join(rows)


class _Session:
    """The menu dialogue over one system."""

    def __init__(
        self,
        system: SimpleSystem,
        prompt: Callable[[str], str],
        write: Callable[[str], None],
    ) -> None:
        self.system = system
        self.prompt = prompt
        self.write = write

    def ask_word(self, message: str) -> str:
        return self.prompt(message).strip()

    def ask_char(self, message: str) -> str:
        return self.prompt(message).strip()[:1]

    def _ask_number(self, message: str, convert: Callable[[str], float]):
        while True:
            answer = self.prompt(message).strip()
            try:
                return convert(answer)
            except ValueError:
                self.write("Gia tri khong hop le!")

    def ask_int(self, message: str) -> int:
        return self._ask_number(message, int)

    def ask_float(self, message: str) -> float:
        return self._ask_number(message, float)

    def read_product(self) -> Product:
        code = self.ask_word("Ma SP: ")
        name = self.prompt("Ten SP: ")
        price = self.ask_float("Gia: ")
        return Product(code=code, name=name, price=price)

    def read_line(self) -> OrderLine:
        code = self.ask_word("Ma SP: ")
        quantity = self.ask_int("So luong: ")
        return OrderLine(code, quantity)

    def read_order(self) -> Order:
        order = Order(
            code=self.ask_word("\nNhap ma DH: "),
            customer=self.prompt("Nhap ten khach hang: "),
        )
        while True:
            order.add_line(self.read_line())
            if self.ask_char("Them SP khac? (y/n): ") not in ("y", "Y"):
                return order

    def loop(self) -> None:
        actions = {
            1: self.add_product,
            2: self.edit_product,
            3: self.remove_product,
            4: self.add_order,
            5: self.edit_order,
            6: self.remove_order,
            7: lambda: self.write(self.system.product_listing()),
            8: lambda: self.write(self.system.order_listing()),
        }
        while True:
            self.write(_MENU)
            try:
                choice = int(self.prompt("Chon: ").strip())
            except ValueError:
                self.write(_INVALID_CHOICE)
                continue
            if choice == 9:
                self.write("\nTam biet!\n")
                return
            action = actions.get(choice)
            if action is None:
                self.write(_INVALID_CHOICE)
            else:
                action()

    def add_product(self) -> None:
        self.system.add_product(self.read_product())

    def edit_product(self) -> None:
        code = self.ask_word("Ma SP can sua: ")
        if not any(product.code == code for product in self.system.products):
            self.write("Khong tim thay SP!\n")
            return
        self.system.replace_product(code, self.read_product())
        self.write("Sua thanh cong!\n")

    def remove_product(self) -> None:
        code = self.ask_word("Ma SP can xoa: ")
        try:
            self.system.remove_product(code)
        except ProductInUseError:
            self.write("Loi: SP dang co trong don hang!\n")
        except NotFoundError:
            self.write("Khong tim thay SP!\n")
        else:
            self.write("Xoa thanh cong!\n")

    def add_order(self) -> None:
        self.write("\nNhap thong tin don hang:")
        self.system.add_order(self.read_order())
        self.write("Them thanh cong!\n")

    def edit_order(self) -> None:
        code = self.ask_word("Ma DH can sua: ")
        try:
            order = self.system.find_order(code)
        except NotFoundError:
            self.write("Khong tim thay DH!\n")
            return
        self.edit_lines(order)
        self.write("Sua thanh cong!\n")

    def edit_lines(self, order: Order) -> None:
        while True:
            self.write(_EDIT_MENU)
            choice = self.ask_char("Chon: ")
            if choice == "d":
                return
            if choice == "a":
                order.add_line(self.read_line())
                self.write("--- Them thanh cong! ---")
            elif choice in ("b", "c"):
                line = order.find_line(self.ask_word("Ma SP: "))
                if line is None:
                    continue
                if choice == "b":
                    line.quantity = self.ask_int("SL moi: ")
                    self.write("--- Cap nhat thanh cong! ---")
                else:
                    order.lines.remove(line)
                    self.write("--- Xoa thanh cong! ---")

    def remove_order(self) -> None:
        code = self.prompt("Ma DH can xoa: ")
        try:
            self.system.remove_order(code)
        except NotFoundError:
            self.write("Khong tim thay DH!\n")
        else:
            self.write("Xoa thanh cong!\n")


def run(
    system: SimpleSystem,
    prompt: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """Run the menu over the system until the user quits or input runs out."""
    session = _Session(
        system,
        prompt if prompt is not None else input,
        write if write is not None else print,
    )
    try:
        session.loop()
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the menu over an empty in-memory system."""
    argparse.ArgumentParser(
        prog="donhangkho-simple",
        description="Manage products and orders kept in memory.",
    ).parse_args(argv)
    run(SimpleSystem(), input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
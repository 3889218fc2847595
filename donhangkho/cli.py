"""Interactive menu for managing products and orders."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from donhangkho.inventory import (
    InsufficientStockError,
    Inventory,
    NotFoundError,
    ProductInUseError,
)
from donhangkho.models import Order, Product
from donhangkho.storage import (
    CorruptDataError,
    load_orders,
    load_products,
    save_orders,
    save_products,
)

_MAIN_MENU = "\n".join(
    [
        "\n=== QUAN LY DON HANG ===",
        "1. Them san pham",
        "2. Sua san pham",
        "3. Xoa san pham",
        "4. Tao don hang",
        "5. Sua don hang",
        "6. Xoa don hang",
        "7. Xem san pham",
        "8. Xem don hang",
        "9. Thoat",
    ]
)

_ORDER_MENU = "\n".join(
    [
        "\n=== SUA DON HANG ===",
        "a. Them san pham",
        "b. Sua so luong",
        "c. Xoa san pham",
        "d. Thoat",
    ]
)

_INVALID_CHOICE = "Lua chon khong hop le!"


class App:
    """The menu loop over an inventory, reading and writing through callables."""

    def __init__(
        self,
        inventory: Inventory,
        prompt: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.inventory = inventory
        self._prompt = prompt if prompt is not None else input
        self._write = write if write is not None else print

    def _persist(self, products: bool, orders: bool) -> None:
        """Hook called after a change; the base application keeps data in memory."""

    def _ask_number(self, message: str, convert: Callable[[str], float]):
        while True:
            answer = self._prompt(message)
            try:
                return convert(answer.strip())
            except ValueError:
                self._write("Gia tri khong hop le!")

    def _ask_int(self, message: str) -> int:
        return self._ask_number(message, int)

    def _ask_float(self, message: str) -> float:
        return self._ask_number(message, float)

    def _ask_char(self, message: str) -> str:
        return self._prompt(message).strip()[:1]

    def run(self) -> None:
        """Show the main menu until the user quits or input runs out."""
        actions = {
            1: (self._add_product, True, False),
            2: (self._edit_product, True, False),
            3: (self._remove_product, True, False),
            4: (self._create_order, True, True),
            5: (self._edit_order_by_code, True, True),
            6: (self._remove_order, False, True),
            7: (self._show_products, False, False),
            8: (self._show_orders, False, False),
        }
        try:
            while True:
                self._write(_MAIN_MENU)
                answer = self._prompt("Chon (1-9): ").strip()
                try:
                    choice = int(answer)
                except ValueError:
                    self._write(_INVALID_CHOICE)
                    continue
                if choice == 9:
                    self._write("Cam on ban da su dung! Tam biet!")
                    return
                if choice not in actions:
                    self._write(_INVALID_CHOICE)
                    continue
                action, products_changed, orders_changed = actions[choice]
                action()
                if products_changed or orders_changed:
                    self._persist(products_changed, orders_changed)
        except EOFError:
            return

    def _add_product(self) -> None:
        self._write("\n=== THEM SAN PHAM ===")
        code = self._prompt("Nhap ma: ")
        name = self._prompt("Nhap ten: ")
        price = self._ask_float("Nhap gia: ")
        quantity = self._ask_int("Nhap so luong: ")
        self.inventory.add_product(Product(code, name, price, quantity))
        self._write("Da them san pham!")

    def _edit_product(self) -> None:
        self._write("\n=== SUA SAN PHAM ===")
        code = self._prompt("Nhap ma san pham can sua: ")
        try:
            current = self.inventory.find_product(code)
        except NotFoundError:
            self._write("Khong tim thay san pham!")
            return
        new_code = self._prompt(f"Nhap ma moi (hien tai: {current.code}): ")
        name = self._prompt("Nhap ten moi: ")
        price = self._ask_float("Nhap gia moi: ")
        quantity = self._ask_int("Nhap so luong moi: ")
        self.inventory.update_product(code, Product(new_code, name, price, quantity))
        self._write("Da sua san pham!")

    def _remove_product(self) -> None:
        self._write("\n=== XOA SAN PHAM ===")
        code = self._prompt("Nhap ma san pham can xoa: ")
        try:
            self.inventory.remove_product(code)
        except ProductInUseError:
            self._write("Khong the xoa! San pham dang co trong don hang.")
        except NotFoundError:
            self._write("Khong tim thay san pham!")
        else:
            self._write("Da xoa san pham!")

    def _create_order(self) -> None:
        self._write("\n=== TAO DON HANG ===")
        order = Order(
            code=self._prompt("Nhap ma don: "),
            customer=self._prompt("Nhap ten khach hang: "),
            date=self._prompt("Nhap ngay (dd/mm/yyyy): "),
        )
        while True:
            product_code = self._prompt("Nhap ma san pham: ")
            try:
                self.inventory.find_product(product_code)
            except NotFoundError:
                self._write("Khong tim thay san pham!")
            else:
                quantity = self._ask_int("Nhap so luong: ")
                try:
                    self.inventory.add_to_order(order, product_code, quantity, True)
                except InsufficientStockError:
                    self._write("So luong khong du!")
                else:
                    self._write("Da them san pham vao don!")
            if self._ask_char("Them san pham khac? (y/n): ") not in ("y", "Y"):
                break
        self.inventory.add_order(order)
        self._write("Da tao don hang!")

    def _edit_order_by_code(self) -> None:
        self._write("\n=== SUA DON HANG ===")
        code = self._prompt("Nhap ma don can sua: ")
        try:
            order = self.inventory.find_order(code)
        except NotFoundError:
            self._write("Khong tim thay don hang!")
            return
        self.edit_order(order)

    def edit_order(self, order: Order) -> None:
        """Run the order-editing submenu for one order until the user leaves it."""
        while True:
            self._write(_ORDER_MENU)
            choice = self._ask_char("Chon (a-d): ")
            if choice == "a":
                product_code = self._prompt("Nhap ma san pham: ")
                try:
                    self.inventory.find_product(product_code)
                except NotFoundError:
                    self._write("Khong tim thay san pham!")
                    continue
                quantity = self._ask_int("Nhap so luong: ")
                self.inventory.add_to_order(order, product_code, quantity, False)
                self._write("Da them san pham!")
            elif choice == "b":
                product_code = self._prompt("Nhap ma san pham: ")
                if not order.contains(product_code):
                    self._write("Khong tim thay san pham trong don!")
                    continue
                quantity = self._ask_int("Nhap so luong moi: ")
                self.inventory.change_quantity(order, product_code, quantity)
                self._write("Da sua so luong!")
            elif choice == "c":
                product_code = self._prompt("Nhap ma san pham can xoa: ")
                try:
                    self.inventory.remove_from_order(order, product_code)
                except NotFoundError:
                    self._write("Khong tim thay san pham trong don!")
                else:
                    self._write("Da xoa san pham khoi don!")
            elif choice == "d":
                self._write("Thoat sua don hang!")
                return
            else:
                self._write(_INVALID_CHOICE)

    def _remove_order(self) -> None:
        self._write("\n=== XOA DON HANG ===")
        code = self._prompt("Nhap ma don can xoa: ")
        try:
            self.inventory.remove_order(code)
        except NotFoundError:
            self._write("Khong tim thay don hang!")
        else:
            self._write("Da xoa don hang!")

    def _show_products(self) -> None:
        self._write("\n=== DANH SACH SAN PHAM ===")
        self._write(self.inventory.product_table())

    def _show_orders(self) -> None:
        self._write("\n=== DANH SACH DON HANG ===")
        self._write(self.inventory.order_report())


class _FileBackedApp(App):
    def _persist(self, products: bool, orders: bool) -> None:
        if orders:
            save_orders(self.inventory.orders)
        if products:
            save_products(self.inventory.products)


def main(argv: list[str] | None = None) -> int:
    """Load the data files in the working directory and run the menu."""
    argparse.ArgumentParser(
        prog="donhangkho",
        description="Manage products and orders stored in the working directory.",
    ).parse_args(argv)
    try:
        inventory = Inventory(load_products(), load_orders())
    except CorruptDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _FileBackedApp(inventory).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
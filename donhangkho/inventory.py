"""Stock and order bookkeeping: products, orders and the stock they share."""

from __future__ import annotations

from donhangkho.models import Order, OrderLine, Product, product_in_orders


class InventoryError(Exception):
    """Base class for inventory failures."""


class NotFoundError(InventoryError, LookupError):
    """No product, order or order line has the given code."""


class InsufficientStockError(InventoryError):
    """The requested quantity exceeds the stock on hand."""


class ProductInUseError(InventoryError):
    """The product is still referenced by an order."""


class Inventory:
    """The product list and the order list, kept consistent with each other."""

    def __init__(
        self,
        products: list[Product] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        self.products = products if products is not None else []
        self.orders = orders if orders is not None else []

    def find_product(self, code: str) -> Product:
        """Return the first product with the code."""
        for product in self.products:
            if product.code == code:
                return product
        raise NotFoundError(f"no product with code {code!r}")

    def find_order(self, code: str) -> Order:
        """Return the first order with the code."""
        for order in self.orders:
            if order.code == code:
                return order
        raise NotFoundError(f"no order with code {code!r}")

    def add_product(self, product: Product) -> None:
        """Append a product to the list."""
        self.products.append(product)

    def update_product(self, code: str, product: Product) -> Product:
        """Overwrite every field of the product with the code; return it."""
        existing = self.find_product(code)
        existing.code = product.code
        existing.name = product.name
        existing.price = product.price
        existing.quantity = product.quantity
        return existing

    def remove_product(self, code: str) -> Product:
        """Remove and return a product that no order refers to."""
        if product_in_orders(code, self.orders):
            raise ProductInUseError(f"product {code!r} is part of an order")
        product = self.find_product(code)
        self.products.remove(product)
        return product

    def add_order(self, order: Order) -> None:
        """Append an order to the list."""
        self.orders.append(order)

    def remove_order(self, code: str) -> Order:
        """Remove and return the first order with the code."""
        order = self.find_order(code)
        self.orders.remove(order)
        return order

    def add_to_order(
        self,
        order: Order,
        product_code: str,
        quantity: int,
        check_stock: bool = True,
    ) -> OrderLine:
        """Add a line to the order and take its quantity out of stock."""
        product = self.find_product(product_code)
        if check_stock and quantity > product.quantity:
            raise InsufficientStockError(
                f"only {product.quantity} of {product_code!r} in stock"
            )
        line = OrderLine(product_code, quantity)
        order.add_line(line)
        product.quantity -= quantity
        return line

    def change_quantity(self, order: Order, product_code: str, quantity: int) -> OrderLine:
        """Set a line's quantity, moving the difference out of or into stock."""
        line = order.find_line(product_code)
        if line is None:
            raise NotFoundError(f"product {product_code!r} is not in order {order.code!r}")
        try:
            product = self.find_product(product_code)
        except NotFoundError:
            pass
        else:
            product.quantity -= quantity - line.quantity
        line.quantity = quantity
        return line

    def remove_from_order(self, order: Order, product_code: str) -> OrderLine:
        """Remove a line from the order and return its quantity to stock."""
        line = order.find_line(product_code)
        if line is None:
            raise NotFoundError(f"product {product_code!r} is not in order {order.code!r}")
        try:
            product = self.find_product(product_code)
        except NotFoundError:
            pass
        else:
            product.quantity += line.quantity
        order.lines.remove(line)
        return line

    def product_table(self) -> str:
        """The products as a fixed-width table."""
        if not self.products:
            return "Khong co san pham nao!"
        rows = [f"{'Ma':<10}{'Ten':<20}{'Gia':<10}{'So luong':<10}", "-" * 50]
        rows.extend(product.row() for product in self.products)
        return "\n".join(rows)

    def _product_name(self, code: str) -> str:
        try:
            return self.find_product(code).name
        except NotFoundError:
            return "---"

    def order_report(self) -> str:
        """Every order with its lines and the names of their products."""
        if not self.orders:
            return "Khong co don hang nao!"
        rows: list[str] = []
        for order in self.orders:
            rows.extend(
                [
                    "",
                    "=" * 60,
                    f"Ma DH: {order.code}",
                    f"Khach hang: {order.customer}",
                    f"Ngay: {order.date}",
                    "Danh sach san pham:",
                    f"{'Ma SP':<10}{'Ten':<20}{'So luong':<10}",
                    "-" * 60,
                ]
            )
            rows.extend(
                f"{line.product_code:<10}{self._product_name(line.product_code):<20}"
                f"{line.quantity!s:<10}"
                for line in order.lines
            )
        return "\n".join(rows)
import pytest

from donhangkho.models import Order, OrderLine, Product, product_in_orders


def _order():
    return Order(
        code="DH1",
        customer="Nguyen Van A",
        date="01/02/2024",
        lines=[OrderLine("SP1", 3), OrderLine("SP2", 5)],
    )


def test_product_defaults():
    product = Product()
    assert (product.code, product.name, product.price, product.quantity) == ("", "", 0.0, 0)


def test_row_columns_and_width():
    row = Product("SP01", "But", 15000.0, 10).row()
    assert len(row) == 50
    assert row.split() == ["SP01", "But", "15000", "10"]
    assert row.startswith("SP01 ")


def test_row_uses_general_float_format():
    row = Product("X", "Y", 1500000.0, 1).row()
    assert row.split()[2] == "1.5e+06"


def test_row_long_fields_not_truncated():
    name = "N" * 25
    row = Product("C", name, 1.0, 2).row()
    assert name in row


def test_priced_row():
    row = Product("SP01", "But bi", 15000, 4).priced_row()
    assert row.endswith("15000.00 VND")
    assert len(row) == 15 + 30 + 12 + len(" VND")
    assert row.startswith("SP01")
    assert row[15:21] == "But bi"


def test_add_and_find_line():
    order = Order(code="D")
    line = OrderLine("SP9", 2)
    order.add_line(line)
    assert order.find_line("SP9") is line
    assert order.find_line("nothing") is None


def test_find_line_returns_first_match():
    order = Order(lines=[OrderLine("A", 1), OrderLine("A", 2)])
    assert order.find_line("A").quantity == 1


def test_remove_line():
    order = _order()
    removed = order.remove_line("SP1")
    assert removed == OrderLine("SP1", 3)
    assert [line.product_code for line in order.lines] == ["SP2"]


def test_remove_missing_line_raises():
    order = _order()
    with pytest.raises(KeyError):
        order.remove_line("SP7")
    assert len(order.lines) == 2


def test_contains():
    order = _order()
    assert order.contains("SP2")
    assert not order.contains("SP3")


def test_lines_are_not_shared_between_orders():
    first, second = Order(), Order()
    first.add_line(OrderLine("A", 1))
    assert second.lines == []


def test_summary():
    lines = _order().summary().splitlines()
    assert lines == [
        "Ma DH: DH1",
        "Khach hang: Nguyen Van A",
        "Ngay: 01/02/2024",
        "So san pham: 2",
    ]


def test_detail():
    lines = _order().detail().splitlines()
    assert lines[0] == "Ma DH: DH1 | Khach hang: Nguyen Van A"
    assert lines[1].startswith("Ma SP") and lines[1].endswith("So luong")
    assert lines[2] == "-" * 30
    assert [row.split() for row in lines[3:]] == [["SP1", "3"], ["SP2", "5"]]
    assert all(len(row) == 20 + 1 for row in lines[3:])


def test_detail_empty_order():
    lines = Order(code="E", customer="K").detail().splitlines()
    assert len(lines) == 3


def test_product_in_orders():
    orders = [Order(code="1"), _order()]
    assert product_in_orders("SP2", orders)
    assert not product_in_orders("SP5", orders)
    assert not product_in_orders("SP1", [])
import pytest

from donhangkho.cli import App, main
from donhangkho.inventory import Inventory
from donhangkho.models import Order, OrderLine, Product
from donhangkho.storage import load_orders, load_products, save_products


def run_app(inputs, products=None, orders=None):
    inventory = Inventory(products if products is not None else [],
                          orders if orders is not None else [])
    answers = iter(inputs)
    out = []

    def prompt(message):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    App(inventory, prompt, out.append).run()
    return inventory, out


def test_add_product_and_quit():
    inventory, out = run_app(["1", "P1", "Pen", "2.5", "10", "9"])
    assert inventory.products == [Product("P1", "Pen", 2.5, 10)]
    assert "Da them san pham!" in out
    assert out[-1] == "Cam on ban da su dung! Tam biet!"


def test_invalid_numbers_are_asked_again():
    inventory, out = run_app(["1", "P1", "Pen", "abc", "2.5", "x", "10", "9"])
    assert inventory.products == [Product("P1", "Pen", 2.5, 10)]
    assert out.count("Gia tri khong hop le!") == 2


def test_invalid_menu_choice():
    _, out = run_app(["42", "hello", "9"])
    assert out.count("Lua chon khong hop le!") == 2


def test_end_of_input_stops():
    inventory, out = run_app([])
    assert inventory.products == []
    assert "Cam on ban da su dung! Tam biet!" not in out


def test_edit_product():
    inventory, out = run_app(
        ["2", "P1", "P9", "Marker", "3", "7", "9"], [Product("P1", "Pen", 2.5, 10)]
    )
    assert inventory.products == [Product("P9", "Marker", 3.0, 7)]
    assert "Da sua san pham!" in out


def test_edit_missing_product():
    _, out = run_app(["2", "X", "9"])
    assert "Khong tim thay san pham!" in out


def test_remove_product_in_use():
    products = [Product("P1", "Pen", 2.5, 10)]
    orders = [Order("D1", lines=[OrderLine("P1", 1)])]
    inventory, out = run_app(["3", "P1", "9"], products, orders)
    assert "Khong the xoa! San pham dang co trong don hang." in out
    assert len(inventory.products) == 1


def test_remove_product():
    inventory, out = run_app(["3", "P1", "3", "P1", "9"], [Product("P1")])
    assert inventory.products == []
    assert "Da xoa san pham!" in out
    assert "Khong tim thay san pham!" in out


def test_create_order_checks_stock():
    products = [Product("P1", "Pen", 2.5, 5)]
    inputs = ["4", "D1", "An", "01/01/2024", "P1", "9", "y", "X", "y",
              "P1", "3", "n", "9"]
    inventory, out = run_app(inputs, products)
    assert "So luong khong du!" in out
    assert "Khong tim thay san pham!" in out
    assert "Da them san pham vao don!" in out
    assert "Da tao don hang!" in out
    order = inventory.find_order("D1")
    assert (order.customer, order.date) == ("An", "01/01/2024")
    assert order.lines == [OrderLine("P1", 3)]
    assert inventory.find_product("P1").quantity == 5 - 3


def test_edit_order_submenu():
    products = [Product("P1", "Pen", 2.5, 5), Product("P2", "Book", 12.0, 2)]
    orders = [Order("D1", lines=[OrderLine("P1", 1)])]
    inputs = ["5", "D1",
              "a", "P2", "4",
              "b", "P1", "3",
              "c", "P2",
              "c", "P2",
              "z",
              "d", "9"]
    inventory, out = run_app(inputs, products, orders)
    order = inventory.find_order("D1")
    assert order.lines == [OrderLine("P1", 3)]
    assert inventory.find_product("P1").quantity == 5 - (3 - 1)
    assert inventory.find_product("P2").quantity == 2
    assert "Da them san pham!" in out
    assert "Da sua so luong!" in out
    assert "Da xoa san pham khoi don!" in out
    assert "Khong tim thay san pham trong don!" in out
    assert "Lua chon khong hop le!" in out
    assert "Thoat sua don hang!" in out


def test_edit_order_direct():
    inventory = Inventory([Product("P1", "Pen", 1.0, 1)], [])
    order = Order("D1")
    answers = iter(["b", "P1", "d"])
    out = []
    App(inventory, lambda _m: next(answers), out.append).edit_order(order)
    assert "Khong tim thay san pham trong don!" in out
    assert out[-1] == "Thoat sua don hang!"


def test_edit_missing_order():
    _, out = run_app(["5", "X", "9"])
    assert "Khong tim thay don hang!" in out


def test_remove_order():
    inventory, out = run_app(["6", "D1", "6", "D1", "9"], [], [Order("D1")])
    assert inventory.orders == []
    assert "Da xoa don hang!" in out
    assert "Khong tim thay don hang!" in out


def test_show_lists():
    products = [Product("P1", "Pen", 2.5, 5)]
    orders = [Order("D1", "An", "01/01/2024", [OrderLine("P1", 2)])]
    inventory, out = run_app(["7", "8", "9"], products, orders)
    assert "\n=== DANH SACH SAN PHAM ===" in out
    assert inventory.product_table() in out
    assert "\n=== DANH SACH DON HANG ===" in out
    assert inventory.order_report() in out


def test_show_empty_lists():
    _, out = run_app(["7", "8", "9"])
    assert "Khong co san pham nao!" in out
    assert "Khong co don hang nao!" in out


def test_main_saves_files(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    save_products([Product("P1", "Pen", 2.5, 5)], tmp_path / "sanpham.dat")
    answers = iter(["4", "D1", "An", "01/01/2024", "P1", "2", "n", "9"])
    monkeypatch.setattr("builtins.input", lambda _m="": next(answers))
    assert main([]) == 0
    assert load_products(tmp_path / "sanpham.dat") == [Product("P1", "Pen", 2.5, 3)]
    orders = load_orders(tmp_path / "donhang.dat")
    assert orders == [Order("D1", "An", "01/01/2024", [OrderLine("P1", 2)])]
    assert "Cam on ban da su dung! Tam biet!" in capsys.readouterr().out


def test_main_corrupt_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sanpham.dat").write_bytes(b"\x01")
    assert main([]) == 1


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])
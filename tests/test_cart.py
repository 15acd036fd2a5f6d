from decimal import Decimal
from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from agrimart.models.cart import CartItem
from agrimart.services.cart import CartService, cart_total

SESSION = "8b6f4c1e-1111-4a2b-9c3d-000000000001"
OTHER_SESSION = "8b6f4c1e-2222-4a2b-9c3d-000000000002"


@pytest.fixture
def service(session):
    return CartService(session)


@pytest.mark.parametrize("increments", [[1], [2, 3], [1, 1, 1, 1], [5, 10, 2]])
def test_add_or_increment_sums_quantities(service, products, increments):
    wheat = products["Wheat"]
    for quantity in increments:
        assert service.add_or_increment(SESSION, wheat.id, quantity) is True

    lines = service.list_cart_lines(SESSION)
    assert len(lines) == 1
    assert lines[0].quantity == sum(increments)


def test_lines_carry_product_snapshot(service, products):
    service.add_or_increment(SESSION, products["Urea"].id, 2)

    [line] = service.list_cart_lines(SESSION)
    assert line.session_id == SESSION
    assert line.user_id is None
    assert line.product.name == "Urea"
    assert line.product.price == Decimal("266.50")
    assert line.product.unit == "per 45 kg bag"
    assert line.line_total == Decimal("533.00")


def test_lines_are_scoped_to_session(service, products):
    service.add_or_increment(SESSION, products["Wheat"].id, 1)
    service.add_or_increment(OTHER_SESSION, products["Rice"].id, 4)

    assert [l.product.name for l in service.list_cart_lines(SESSION)] == ["Wheat"]
    assert [l.product.name for l in service.list_cart_lines(OTHER_SESSION)] == ["Rice"]


def test_add_unknown_product_changes_nothing(service, products):
    assert service.add_or_increment(SESSION, 9999, 1) is False
    assert service.list_cart_lines(SESSION) == []


@pytest.mark.parametrize("quantity", [1, 2, 7, 100])
def test_set_quantity_is_visible_on_next_read(service, products, quantity):
    service.add_or_increment(SESSION, products["Rice"].id, 3)
    [line] = service.list_cart_lines(SESSION)

    assert service.set_quantity(SESSION, line.id, quantity) is True
    [line] = service.list_cart_lines(SESSION)
    assert line.quantity == quantity


def test_set_quantity_unknown_line(service):
    assert service.set_quantity(SESSION, 9999, 2) is False


def test_remove_line(service, products):
    service.add_or_increment(SESSION, products["Rice"].id, 1)
    service.add_or_increment(SESSION, products["Wheat"].id, 1)
    rice_line = service.list_cart_lines(SESSION)[0]

    assert service.remove_line(SESSION, rice_line.id) is True
    remaining = service.list_cart_lines(SESSION)
    assert rice_line.id not in [l.id for l in remaining]
    assert [l.product.name for l in remaining] == ["Wheat"]
    assert service.remove_line(SESSION, rice_line.id) is False


def test_clear_session_only_touches_that_session(service, session, products):
    service.add_or_increment(SESSION, products["Rice"].id, 1)
    service.add_or_increment(SESSION, products["Wheat"].id, 1)
    service.add_or_increment(OTHER_SESSION, products["Urea"].id, 1)

    assert service.clear_session(SESSION) == 2
    assert service.list_cart_lines(SESSION) == []
    assert len(service.list_cart_lines(OTHER_SESSION)) == 1


def test_lines_for_missing_products_are_skipped(service, session, products):
    session.add(CartItem(session_id=SESSION, product_id=9999, quantity=1))
    session.commit()
    service.add_or_increment(SESSION, products["Wheat"].id, 1)

    assert [l.product.name for l in service.list_cart_lines(SESSION)] == ["Wheat"]


def test_failed_read_returns_empty_cart(service, session, products):
    service.add_or_increment(SESSION, products["Wheat"].id, 1)
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    with mock.patch.object(session, "exec", side_effect=error):
        assert service.list_cart_lines(SESSION) == []


def test_failed_write_reports_nothing_changed(service, session, products):
    service.add_or_increment(SESSION, products["Wheat"].id, 1)
    [line] = service.list_cart_lines(SESSION)

    error = OperationalError("UPDATE", {}, Exception("disk I/O error"))
    with mock.patch.object(session, "commit", side_effect=error):
        assert service.set_quantity(SESSION, line.id, 5) is False

    [line] = service.list_cart_lines(SESSION)
    assert line.quantity == 1


def test_cart_total_and_summary(service, products):
    service.add_or_increment(SESSION, products["Wheat"].id, 2)
    service.add_or_increment(SESSION, products["Urea"].id, 4)

    lines = service.list_cart_lines(SESSION)
    assert cart_total(lines) == Decimal("1266.00")

    summary = service.get_summary(SESSION)
    assert summary.item_count == 2
    assert summary.total == Decimal("1266.00")
    assert summary.display_total == "₹1,266"


def test_lines_of_another_session_are_out_of_reach(service, products):
    service.add_or_increment(SESSION, products["Wheat"].id, 2)
    [line] = service.list_cart_lines(SESSION)

    assert service.set_quantity(OTHER_SESSION, line.id, 99) is False
    assert service.remove_line(OTHER_SESSION, line.id) is False

    [line] = service.list_cart_lines(SESSION)
    assert line.quantity == 2


def test_created_at_is_timezone_aware():
    item = CartItem(session_id=SESSION, product_id=1, quantity=1)
    assert item.created_at.tzinfo is not None

from unittest import mock

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from agrimart.services.catalog import CatalogService


def test_products_sorted_by_category_then_name(session, products):
    names = [p.name for p in CatalogService(session).list_products()]
    assert names == ["Rice", "Wheat", "Urea"]


def test_empty_catalog_returns_empty_list(session):
    assert CatalogService(session).list_products() == []


def test_failed_read_degrades_to_empty_list(session, products):
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    with mock.patch.object(session, "exec", side_effect=error):
        assert CatalogService(session).list_products() == []


def test_get_product(session, products):
    service = CatalogService(session)
    assert service.get_product(products["Urea"].id).name == "Urea"
    assert service.get_product(9999) is None


def test_category_is_stored_by_value(session, products):
    stored = session.connection().execute(
        text("SELECT DISTINCT category FROM product ORDER BY category")
    ).scalars().all()
    assert stored == ["crops", "fertilizers"]

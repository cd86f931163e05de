"""Tests for ProductService"""
import json

import pytest

from Services.errors import NotFoundError, ValidationError
from Services.product_service import ProductService, parse_limit


class TestCreateProduct:
    """Tests de creación de productos."""

    def test_create_then_get(self, product_service, pen_fields):
        created = product_service.create_product(pen_fields)

        fetched = product_service.get_product(created["id"])
        assert fetched == {**pen_fields, "id": created["id"], "status": True, "thumbnails": []}

    def test_thumbnails_are_kept(self, product_service, pen_fields):
        created = product_service.create_product({**pen_fields, "thumbnails": ["a.png", "b.png"]})
        assert created["thumbnails"] == ["a.png", "b.png"]

    def test_missing_fields(self, product_service):
        with pytest.raises(ValidationError) as exc:
            product_service.create_product({"title": "x"})

        assert exc.value.missing_fields == ["description", "code", "price", "stock", "category"]
        assert "description" in exc.value.message

    @pytest.mark.parametrize("field,value", [("title", ""), ("price", 0), ("stock", None)])
    def test_falsy_required_field_is_missing(self, product_service, pen_fields, field, value):
        with pytest.raises(ValidationError) as exc:
            product_service.create_product({**pen_fields, field: value})
        assert exc.value.missing_fields == [field]

    def test_failed_create_writes_nothing(self, product_service, product_dao):
        with pytest.raises(ValidationError):
            product_service.create_product({})
        assert product_dao.read_all() == []

    def test_ids_are_distinct(self, product_service, pen_fields):
        ids = {product_service.create_product(pen_fields)["id"] for _ in range(20)}
        assert len(ids) == 20

    def test_persisted_to_file(self, product_service, product_dao, pen_fields):
        created = product_service.create_product(pen_fields)

        with open(product_dao.file_path, encoding="utf-8") as f:
            assert json.load(f) == [created]

    def test_status_from_input_is_ignored(self, product_service, pen_fields):
        created = product_service.create_product({**pen_fields, "status": False, "id": "mine"})
        assert created["status"] is True
        assert created["id"] != "mine"


class TestListProducts:
    """Tests del listado con límite."""

    @pytest.fixture
    def five_products(self, product_service, pen_fields):
        return [product_service.create_product({**pen_fields, "code": f"PN{i}"}) for i in range(5)]

    def test_empty(self, product_service):
        assert product_service.list_products() == []

    def test_all(self, product_service, five_products):
        assert product_service.list_products() == five_products

    def test_limit(self, product_service, five_products):
        assert product_service.list_products(limit=2) == five_products[:2]
        assert product_service.list_products(limit="3") == five_products[:3]

    def test_limit_larger_than_collection(self, product_service, five_products):
        assert product_service.list_products(limit=50) == five_products

    def test_limit_uses_leading_integer(self, product_service, five_products):
        assert product_service.list_products(limit="1.5") == five_products[:1]
        assert product_service.list_products(limit="2abc") == five_products[:2]

    @pytest.mark.parametrize("limit", [-1, 0, "abc", "", "-1.5", None])
    def test_invalid_limit_returns_all(self, product_service, five_products, limit):
        assert product_service.list_products(limit=limit) == five_products


@pytest.mark.parametrize("raw,expected", [
    ("2", 2), (" 7 ", 7), (3, 3), ("0", None), ("-4", None), ("x", None), (None, None), (True, None),
    ("1.5", 1), ("2abc", 2), (" 3 items", 3), ("abc2", None),
])
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


class TestUpdateProduct:
    """Tests de actualización parcial."""

    def test_partial_update(self, product_service, pen_fields):
        created = product_service.create_product(pen_fields)

        updated = product_service.update_product(created["id"], {"price": 50})

        assert updated == {**created, "price": 50}
        assert product_service.get_product(created["id"]) == updated

    def test_id_is_never_changed(self, product_service, pen_fields):
        created = product_service.create_product(pen_fields)

        updated = product_service.update_product(created["id"], {"id": "other"})

        assert updated["id"] == created["id"]
        assert product_service.get_product(created["id"]) == created
        with pytest.raises(NotFoundError):
            product_service.get_product("other")

    def test_unknown_fields_are_ignored(self, product_service, pen_fields):
        created = product_service.create_product(pen_fields)

        updated = product_service.update_product(created["id"], {"color": "red", "status": False})

        assert "color" not in updated
        assert updated["status"] is False

    def test_update_missing(self, product_service):
        with pytest.raises(NotFoundError) as exc:
            product_service.update_product("nope", {"price": 1})
        assert exc.value.entity == "product"


class TestDeleteProduct:
    """Tests de borrado."""

    def test_delete_then_get(self, product_service, pen_fields):
        created = product_service.create_product(pen_fields)
        other = product_service.create_product({**pen_fields, "code": "PN2"})

        product_service.delete_product(created["id"])

        with pytest.raises(NotFoundError):
            product_service.get_product(created["id"])
        assert product_service.list_products() == [other]

    def test_delete_missing(self, product_service, product_dao, pen_fields):
        created = product_service.create_product(pen_fields)

        with pytest.raises(NotFoundError):
            product_service.delete_product("nope")
        assert product_dao.read_all() == [created]


def test_get_missing(product_service):
    with pytest.raises(NotFoundError) as exc:
        product_service.get_product("nope")
    assert exc.value.kind == "not_found"

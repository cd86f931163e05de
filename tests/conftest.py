"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from Dao.json_collection_dao import ProductDao, CartDao
from Services.product_service import ProductService
from Services.cart_service import CartService


@pytest.fixture
def product_dao(tmp_path):
    """Colección de productos en un directorio temporal"""
    return ProductDao(str(tmp_path / "products.json"))


@pytest.fixture
def cart_dao(tmp_path):
    """Colección de carritos en un directorio temporal"""
    return CartDao(str(tmp_path / "carts.json"))


@pytest.fixture
def product_service(product_dao):
    return ProductService(product_dao)


@pytest.fixture
def cart_service(cart_dao, product_dao):
    return CartService(cart_dao, product_dao)


@pytest.fixture
def pen_fields():
    """Datos de un producto de ejemplo"""
    return {
        "title": "Pen",
        "description": "Blue pen",
        "code": "PN1",
        "price": 1.5,
        "stock": 100,
        "category": "office",
    }


@pytest.fixture
def client(monkeypatch, product_service, cart_service):
    """Test client con los servicios apuntando a archivos temporales"""
    from Controllers import controller_api
    from main import create_app

    monkeypatch.setattr(controller_api, "product_service", product_service)
    monkeypatch.setattr(controller_api, "cart_service", cart_service)
    return TestClient(create_app())

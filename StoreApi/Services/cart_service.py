import logging
from typing import Any, Dict, Optional

from Dao.json_collection_dao import CartDao, ProductDao
from Services.errors import NotFoundError

logger = logging.getLogger("storeapi")

CART_NOT_FOUND = "Carrito no encontrado"
PRODUCT_NOT_FOUND = "Producto no encontrado"


class CartService:
    """
    Lógica de negocio sobre la colección de carritos.
    Lee la colección de productos solo para validar que existan al agregarlos.
    """
    def __init__(self, dao: Optional[CartDao] = None, product_dao: Optional[ProductDao] = None):
        self.dao = dao or CartDao()
        self.product_dao = product_dao or ProductDao()

    def create_cart(self) -> Dict[str, Any]:
        with self.dao.transaction() as carts:
            new_cart = {"id": self.dao.new_id(carts), "products": []}
            carts.append(new_cart)

        logger.info(f"Servicio: Carrito {new_cart['id']} creado.")
        return new_cart

    def get_cart(self, cart_id: str) -> Dict[str, Any]:
        cart = self.dao.find_by_id(self.dao.read_all(), cart_id)
        if cart is None:
            raise NotFoundError("cart", CART_NOT_FOUND)
        return cart

    def attach_product(self, cart_id: str, product_id: str) -> Dict[str, Any]:
        """
        Agrega un producto al carrito. Si ya está, incrementa su cantidad en 1;
        si no, lo agrega al final con cantidad 1.
        Se guarda la colección completa de carritos.

        args:
            - cart_id: ID del carrito.
            - product_id: ID del producto a agregar.
        """
        with self.dao.transaction() as carts:
            cart = self.dao.find_by_id(carts, cart_id)
            if cart is None:
                logger.warning(f"Servicio: Carrito {cart_id} no encontrado al agregar {product_id}")
                raise NotFoundError("cart", CART_NOT_FOUND)

            # Solo validación de existencia, la colección de productos no se modifica
            products = self.product_dao.read_all()
            if self.product_dao.find_by_id(products, product_id) is None:
                logger.warning(f"Servicio: Producto {product_id} no encontrado al agregar al carrito {cart_id}")
                raise NotFoundError("product", PRODUCT_NOT_FOUND)

            line = next((item for item in cart["products"] if item["product"] == product_id), None)
            if line:
                line["quantity"] += 1
            else:
                line = {"product": product_id, "quantity": 1}
                cart["products"].append(line)

        logger.info(f"Servicio: Producto {product_id} en carrito {cart_id}, cantidad {line['quantity']}.")
        return cart

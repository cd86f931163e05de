import re
import logging
from typing import Any, Dict, List, Optional

from Dao.json_collection_dao import ProductDao
from Services.errors import NotFoundError, ValidationError

logger = logging.getLogger("storeapi")

REQUIRED_FIELDS = ("title", "description", "code", "price", "stock", "category")
UPDATABLE_FIELDS = REQUIRED_FIELDS + ("status", "thumbnails")

PRODUCT_NOT_FOUND = "Producto no encontrado"
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(limit: Any) -> Optional[int]:
    """
    Interpreta el parámetro 'limit' tomando el entero inicial ('1.5' -> 1, '2abc' -> 2).
    Devuelve None si no hay entero o si no es positivo.

    args:
        - limit: Valor crudo recibido (str, int o None).
    """
    if limit is None or isinstance(limit, bool):
        return None
    match = LEADING_INT.match(str(limit))
    if not match:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


class ProductService:
    """
    Lógica de negocio sobre la colección de productos.
    """
    def __init__(self, dao: Optional[ProductDao] = None):
        self.dao = dao or ProductDao()

    def list_products(self, limit: Any = None) -> List[Dict[str, Any]]:
        """
        Devuelve todos los productos, o los primeros 'limit' si es un entero positivo.

        args:
            - limit: Cantidad máxima de productos. Valores inválidos se ignoran.
        """
        products = self.dao.read_all()
        max_items = parse_limit(limit)
        if max_items is not None:
            return products[:max_items]
        return products

    def get_product(self, product_id: str) -> Dict[str, Any]:
        product = self.dao.find_by_id(self.dao.read_all(), product_id)
        if product is None:
            raise NotFoundError("product", PRODUCT_NOT_FOUND)
        return product

    def create_product(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crea un producto. Todos los campos salvo 'thumbnails' son obligatorios.

        args:
            - fields: Diccionario con los datos del producto.
        """
        missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
        if missing:
            raise ValidationError(missing)

        with self.dao.transaction() as products:
            new_product = {
                "id": self.dao.new_id(products),
                "title": fields["title"],
                "description": fields["description"],
                "code": fields["code"],
                "price": fields["price"],
                "status": True,
                "stock": fields["stock"],
                "category": fields["category"],
                "thumbnails": list(fields.get("thumbnails") or []),
            }
            products.append(new_product)

        logger.info(f"Servicio: Producto {new_product['id']} creado.")
        return new_product

    def update_product(self, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Actualiza parcialmente un producto. Solo se pisan los campos enviados;
        el 'id' y cualquier clave desconocida se ignoran.

        args:
            - product_id: ID del producto a modificar.
            - fields: Campos a actualizar.
        """
        ignored = [key for key in fields if key not in UPDATABLE_FIELDS]
        if ignored:
            logger.debug(f"Servicio: Campos ignorados en la actualización de {product_id}: {ignored}")

        with self.dao.transaction() as products:
            product = self.dao.find_by_id(products, product_id)
            if product is None:
                raise NotFoundError("product", PRODUCT_NOT_FOUND)
            for key, value in fields.items():
                if key in UPDATABLE_FIELDS:
                    product[key] = value

        logger.info(f"Servicio: Producto {product_id} actualizado.")
        return product

    def delete_product(self, product_id: str) -> None:
        with self.dao.transaction() as products:
            product = self.dao.find_by_id(products, product_id)
            if product is None:
                raise NotFoundError("product", PRODUCT_NOT_FOUND)
            products.remove(product)

        logger.info(f"Servicio: Producto {product_id} eliminado.")

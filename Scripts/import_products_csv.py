import sys
import logging
from typing import Any, Dict, List

import pandas as pd

from Services.errors import ValidationError
from Services.product_service import ProductService

logger = logging.getLogger("storeapi")

TEXT_COLUMNS = ["title", "description", "code", "category"]
NUMERIC_COLUMNS = ["price", "stock"]


def _to_native(value: Any) -> Any:
    """Convierte escalares de numpy/pandas a tipos nativos serializables en JSON."""
    if pd.isna(value):
        return None
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def load_products_csv(input_file: str) -> List[Dict[str, Any]]:
    """
    Lee un CSV de productos y lo normaliza a diccionarios listos para crear.

    Args:
        input_file: Ruta del archivo CSV de entrada
    """
    df = pd.read_csv(input_file, dtype=str, keep_default_na=False)

    df.columns = df.columns.str.strip().str.lower()

    for col in TEXT_COLUMNS:
        if col in df.columns:
            df[col] = df[col].str.strip()

    if "title" in df.columns:
        df = df[df["title"] != ""].copy()

    for col in NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col].str.strip(), errors="coerce")

    if "thumbnails" in df.columns:
        df["thumbnails"] = df["thumbnails"].apply(
            lambda raw: [t.strip() for t in raw.split("|") if t.strip()]
        )

    return [
        {key: value if isinstance(value, list) else _to_native(value) for key, value in record.items()}
        for record in df.to_dict(orient="records")
    ]


def import_products(input_file: str, service: ProductService) -> List[Dict[str, Any]]:
    """
    Crea un producto por cada fila del CSV. Las filas inválidas se saltean.

    Args:
        input_file: Ruta del archivo CSV de entrada
        service: Servicio de productos destino
    """
    created = []
    for index, fields in enumerate(load_products_csv(input_file)):
        try:
            created.append(service.create_product(fields))
        except ValidationError as e:
            logger.warning(f"Fila {index} ignorada: {e.message}")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    input_file = sys.argv[1] if len(sys.argv) > 1 else "../data/products.csv"

    products = import_products(input_file, ProductService())
    print(f"Productos importados: {len(products)}")

import os
import json
import stat
import uuid
import logging
import tempfile
import threading
from contextlib import contextmanager
from typing import List, Optional, Dict, Any

logger = logging.getLogger("storeapi")

# umask del proceso, leído una sola vez al importar
_UMASK = os.umask(0)
os.umask(_UMASK)


class JsonCollectionDao:
    """
    Data Access Object (DAO) para una colección de registros guardada
    como un único archivo JSON. Cada mutación reescribe la colección completa.
    """

    # Un lock por archivo, compartido por todas las instancias del proceso.
    # No se liberan nunca: hay una entrada por colección, no por request.
    _locks = {}
    _locks_guard = threading.Lock()

    def __init__(self, file_path: str):
        self.file_path = os.path.abspath(file_path)

        with JsonCollectionDao._locks_guard:
            if self.file_path not in JsonCollectionDao._locks:
                JsonCollectionDao._locks[self.file_path] = threading.RLock()
            self._lock = JsonCollectionDao._locks[self.file_path]

    def read_all(self) -> List[Dict[str, Any]]:
        """
        Lee la colección completa. Si el archivo no existe devuelve una lista vacía.
        Un archivo corrupto es un error fatal y se propaga.
        """
        if not os.path.exists(self.file_path):
            return []
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error leyendo la colección {self.file_path}: {e}")
            raise

    def write_all(self, records: List[Dict[str, Any]]) -> None:
        """
        Escribe la colección completa con indentación.
        Se escribe primero a un archivo temporal y luego se reemplaza el original,
        así nunca queda una colección a medio escribir.

        Args:
            - records: Lista completa de registros a persistir.
        """
        directory = os.path.dirname(self.file_path)
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.file_path)
        except Exception as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"Error escribiendo la colección {self.file_path}: {e}")
            raise

    def _file_mode(self) -> int:
        """Permisos del archivo actual, o los de un archivo nuevo según el umask."""
        if os.path.exists(self.file_path):
            return stat.S_IMODE(os.stat(self.file_path).st_mode)
        return 0o666 & ~_UMASK

    @contextmanager
    def transaction(self):
        """
        Context Manager para el ciclo leer-modificar-guardar.
        Toma el lock exclusivo de la colección, entrega la lista cargada y
        la guarda al salir. Si el bloque lanza una excepción no se escribe nada.
        """
        with self._lock:
            records = self.read_all()
            yield records
            self.write_all(records)

    @staticmethod
    def find_by_id(records: List[Dict[str, Any]], record_id: str) -> Optional[Dict[str, Any]]:
        for record in records:
            if record.get("id") == record_id:
                return record
        return None

    @staticmethod
    def new_id(records: List[Dict[str, Any]]) -> str:
        """
        Genera un ID aleatorio de 128 bits que no exista en la colección.

        Args:
            - records: Colección actual, para garantizar unicidad.
        """
        existing = {record.get("id") for record in records}
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in existing:
                return candidate


class ProductDao(JsonCollectionDao):
    """Colección de productos. Ruta configurable con PRODUCTS_FILE."""

    def __init__(self, file_path: Optional[str] = None):
        super().__init__(file_path or os.getenv("PRODUCTS_FILE", "data/products.json"))


class CartDao(JsonCollectionDao):
    """Colección de carritos. Ruta configurable con CARTS_FILE."""

    def __init__(self, file_path: Optional[str] = None):
        super().__init__(file_path or os.getenv("CARTS_FILE", "data/carts.json"))

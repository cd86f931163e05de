from typing import List


class StoreError(Exception):
    """Error de negocio recuperable: tiene un tipo (kind) y un mensaje corto."""

    kind = "store_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    kind = "not_found"

    def __init__(self, entity: str, message: str):
        super().__init__(message)
        self.entity = entity


class ValidationError(StoreError):
    kind = "validation"

    def __init__(self, missing_fields: List[str]):
        super().__init__(f"Faltan campos obligatorios: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields

from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

# Todos los campos son opcionales: la validación de obligatorios la hace el servicio
# para responder 400 con la lista de campos faltantes.
class ProductCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    price: Optional[Union[int, float]] = None
    stock: Optional[Union[int, float]] = None
    category: Optional[str] = None
    thumbnails: Optional[List[str]] = None

# Actualización parcial: solo se aplican los campos enviados. 'id' y claves desconocidas se ignoran.
class ProductUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    price: Optional[Union[int, float]] = None
    stock: Optional[Union[int, float]] = None
    category: Optional[str] = None
    status: Optional[bool] = None
    thumbnails: Optional[List[str]] = None

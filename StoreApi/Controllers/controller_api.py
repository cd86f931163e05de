from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse, Response
from typing import Optional
from dotenv import load_dotenv
from Services.product_service import ProductService
from Services.cart_service import CartService
from Services.errors import NotFoundError, ValidationError
from Model.schemas import ProductCreate, ProductUpdate

# Carga variables de entorno (para desarrollo local)
load_dotenv()

router = APIRouter()

product_service = ProductService()
cart_service = CartService()


# ---------------------------------------------------------
# PRODUCTOS
# ---------------------------------------------------------

@router.get("/products")
async def get_products(
    limit: Optional[str] = Query(None, description="Cantidad máxima de productos a devolver")
):
    """
    Lista los productos. Si 'limit' es un entero positivo devuelve solo los primeros.

    args:
    - limit: Cantidad máxima de productos. Valores inválidos se ignoran.
    """
    products = product_service.list_products(limit)
    return JSONResponse(content=products, status_code=200)

@router.get("/products/{product_id}")
async def get_product_detail(product_id: str):
    """
    Detalle de un producto específico.
    args:
    - product_id: ID del producto a buscar.
    """
    try:
        product = product_service.get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return JSONResponse(content=product, status_code=200)

@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductCreate):
    """
    Crea un producto. Todos los campos salvo 'thumbnails' son obligatorios.

    args:
    - product: Datos del producto.
    """
    try:
        new_product = product_service.create_product(product.model_dump(exclude_none=True))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return JSONResponse(content=new_product, status_code=status.HTTP_201_CREATED)

@router.put("/products/{product_id}")
async def update_product(product_id: str, product_update: ProductUpdate):
    """
    Actualiza parcialmente un producto. El 'id' nunca se modifica.

    args:
    - product_id: ID del producto a modificar.
    - product_update: Campos a actualizar.
    """
    try:
        product = product_service.update_product(
            product_id, product_update.model_dump(exclude_unset=True, exclude_none=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return JSONResponse(content=product, status_code=200)

@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str):
    """
    Elimina un producto. Responde 204 sin contenido.

    args:
    - product_id: ID del producto a eliminar.
    """
    try:
        product_service.delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------------------------------------
# CARRITOS
# ---------------------------------------------------------

@router.post("/carts", status_code=status.HTTP_201_CREATED)
async def create_cart():
    """
    Crea un carrito vacío.
    """
    new_cart = cart_service.create_cart()
    return JSONResponse(content=new_cart, status_code=status.HTTP_201_CREATED)

@router.get("/carts/{cart_id}")
async def get_cart(cart_id: str):
    """
    Busca un carrito por su ID, con sus productos.

    args:
    - cart_id: ID del carrito.
    """
    try:
        cart = cart_service.get_cart(cart_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return JSONResponse(content=cart, status_code=200)

@router.post("/carts/{cart_id}/product/{product_id}")
async def add_product_to_cart(cart_id: str, product_id: str):
    """
    Agrega un producto al carrito. Si ya estaba, incrementa su cantidad en 1.

    args:
    - cart_id: ID del carrito.
    - product_id: ID del producto a agregar.
    """
    try:
        cart = cart_service.attach_product(cart_id, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return JSONResponse(content=cart, status_code=200)

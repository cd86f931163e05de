from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from Controllers.controller_api import router as api_router
import logging
import os

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("storeapi")


# Eventos (startup/shutdown)
@asynccontextmanager
async def lifespan(app: FastAPI):
    products_file = os.getenv("PRODUCTS_FILE", "data/products.json")
    carts_file = os.getenv("CARTS_FILE", "data/carts.json")
    logger.info(f"API arrancando: productos en {products_file}, carritos en {carts_file}")
    yield
    logger.info("API apagándose.")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Store API",
        version="0.1.0",
        description="API de productos y carritos sobre colecciones JSON",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "¡Bienvenido al servidor de productos y carritos! Usa /api/products o /api/carts."

    return app

app = create_app()

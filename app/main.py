# app/main.py
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core import ProductIn
from .database import ProductStore
from .errors import RegistryError
from .models import Product
from .sdk import create_product_logic, get_product_logic

# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> ProductStore:
    return request.app.state.store

# ---------------------------
# Product endpoints
# ---------------------------
products_v1 = APIRouter(prefix="/v1/products", tags=["products"])

@products_v1.post("", response_model=Product)
def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return create_product_logic(store, payload)

@products_v1.get("/{name}", response_model=Product)
def get_product(name: str, store: ProductStore = Depends(get_store)):
    return get_product_logic(store, name)

# ---------------------------
# Error handlers
# ---------------------------
async def registry_error_handler(request: Request, exc: RegistryError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        # keep named field segments; "body" and list/byte offsets are dropped
        loc = [part for part in err.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = ".".join(loc) or "body"
        problems.append(f"{field}: {err.get('msg', 'invalid')}")
    return JSONResponse(status_code=400, content={"error": "; ".join(problems)})

# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the application. Every listener serving the returned app shares
    its routing table and its store."""
    app = FastAPI(title="product-registry")
    app.state.store = store if store is not None else ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RegistryError, registry_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(products_v1)
    return app

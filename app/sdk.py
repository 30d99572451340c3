import logging

from .core import ProductIn, _make_product, _now
from .database import ProductStore
from .errors import ProductAlreadyExists, ProductNotFound
from .models import Product

# This file contains the core logic behind the product endpoints.

logger = logging.getLogger(__name__)


def create_product_logic(store: ProductStore, payload: ProductIn) -> Product:
    with store.locked():
        if payload.name in store:
            logger.warning("Reject product %s: already registered", payload.name)
            raise ProductAlreadyExists(payload.name)

        product = _make_product(payload, created_at=_now())
        store.put(product.name, product)

    logger.info("Register product %s success", product.name)
    return product


def get_product_logic(store: ProductStore, name: str) -> Product:
    with store.locked():
        product, found = store.get(name)
    if not found:
        raise ProductNotFound(name)
    return product

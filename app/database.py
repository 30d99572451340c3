import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Tuple

from .models import Product

# In-memory product store. One instance per application, handed to the
# request handlers; nothing here is module-global.


class ProductStore:
    """Name -> Product mapping behind a single exclusive lock.

    ``put`` and ``get`` do not lock on their own. Callers hold ``locked()``
    across the whole check-then-act sequence so an existence check and the
    insert that follows it cannot interleave with another request.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: Dict[str, Product] = {}

    @contextmanager
    def locked(self) -> Iterator["ProductStore"]:
        with self._lock:
            yield self

    def put(self, name: str, product: Product) -> None:
        self._products[name] = product

    def get(self, name: str) -> Tuple[Optional[Product], bool]:
        product = self._products.get(name)
        return product, product is not None

    def __contains__(self, name: object) -> bool:
        return name in self._products

    def __len__(self) -> int:
        return len(self._products)

"""Registry exceptions.

Raised by the create/get logic and turned into ``{"error": ...}`` responses
by the handlers installed in ``app.main``.
"""


class RegistryError(Exception):
    status_code = 400

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message


class ProductAlreadyExists(RegistryError):
    """A product with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(name, f"product {name} already exist")


class ProductNotFound(RegistryError):
    status_code = 404

    def __init__(self, name: str):
        super().__init__(name, f"can not found product {name}")

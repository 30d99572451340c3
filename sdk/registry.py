# sdk/registry.py
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import requests
from rich import print


class ProductClientError(Exception):
    """Non-2xx answer from the registry."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _check(r) -> Dict[str, Any]:
    # works for both requests and httpx responses
    if r.status_code >= 400:
        try:
            message = r.json().get("error", r.text)
        except ValueError:
            message = r.text
        raise ProductClientError(r.status_code, message)
    return r.json()


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:8080", timeout: int = 10, session=None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.transport = transport

    @property
    def products_url(self) -> str:
        return f"{self.base_url}/v1/products"

    def product_url(self, name: str) -> str:
        # names may hold "?", "#" or spaces
        return f"{self.products_url}/{quote(name, safe='')}"

    @staticmethod
    def _payload(username: str, name: str, category: str, price: int, description: str) -> Dict[str, Any]:
        return {
            "username": username, "name": name, "category": category,
            "price": price, "description": description,
        }

    # Register a product; raises ProductClientError on duplicates or bad input
    def register_product(self, username: str, name: str, category: str, price: int, description: str):
        r = self.session.post(self.products_url, json=self._payload(username, name, category, price, description),
                              timeout=self.timeout)
        return _check(r)

    def get_product(self, name: str):
        r = self.session.get(self.product_url(name), timeout=self.timeout)
        return _check(r)

    # Async variants
    def _async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def register_product_async(self, username: str, name: str, category: str, price: int, description: str):
        async with self._async_client() as client:
            r = await client.post(self.products_url, json=self._payload(username, name, category, price, description))
            return _check(r)

    async def get_product_async(self, name: str):
        async with self._async_client() as client:
            r = await client.get(self.product_url(name))
            return _check(r)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Product registry client")
    parser.add_argument("--base-url", default="http://127.0.0.1:8080", help="Registry base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rp = subparsers.add_parser("register", help="Register a new product")
    rp.add_argument("--username", required=True, help="Owner of the product")
    rp.add_argument("--name", required=True, help="Product name (unique)")
    rp.add_argument("--category", required=True, help="Product category")
    rp.add_argument("--price", type=int, required=True, help="Price")
    rp.add_argument("--description", required=True, help="Free-text description")

    gp = subparsers.add_parser("get", help="Get a product by name")
    gp.add_argument("--name", required=True, help="Product name")

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url)

    try:
        if args.command == "register":
            print(c.register_product(args.username, args.name, args.category, args.price, args.description))
        elif args.command == "get":
            print(c.get_product(args.name))
    except ProductClientError as e:
        print(f"[red]{e}[/red]")
        sys.exit(1)

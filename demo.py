#!/usr/bin/env python
from sdk.registry import ProductClient, ProductClientError

def main():
    c = ProductClient(base_url="http://127.0.0.1:8080")

    # -----------------------------
    # Register a product
    # -----------------------------
    print("Registering widget...")
    widget = c.register_product("alice", "widget", "tools", 100, "a widget")
    print(widget)

    # -----------------------------
    # Register it again (rejected)
    # -----------------------------
    print("\nRegistering widget a second time...")
    try:
        c.register_product("bob", "widget", "toys", 5, "another widget")
    except ProductClientError as e:
        print(f"rejected: {e}")

    # -----------------------------
    # Fetch it back
    # -----------------------------
    print("\nFetching widget...")
    print(c.get_product("widget"))

    # -----------------------------
    # Fetch something unknown
    # -----------------------------
    print("\nFetching unknown...")
    try:
        c.get_product("unknown")
    except ProductClientError as e:
        print(f"not found: {e}")

if __name__ == "__main__":
    main()

import asyncio
from sdk.registry import ProductClient, ProductClientError

async def register(client, username, name):
    try:
        product = await client.register_product_async(username, name, "demo", 10, f"{name} from {username}")
        print(f"✅ {username} registered {product['name']} at {product['createdAt']}")
    except ProductClientError as e:
        print(f"❌ {username} failed to register {name}: {e}")

async def main():
    c = ProductClient(base_url="http://127.0.0.1:8080")
    names = [f"gadget-{i}" for i in range(10)]

    print("\n⚡ Registering products concurrently...")
    await asyncio.gather(*(register(c, f"user{i}", name) for i, name in enumerate(names)))

    print("\n📦 Fetching them back...")
    for name in names:
        try:
            print(c.get_product(name))
        except ProductClientError as e:
            print(f"❌ {name}: {e}")

if __name__ == "__main__":
    asyncio.run(main())

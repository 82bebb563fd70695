"""
Example: Basic requests with fdy-fetch-client

Shows base URL prefixing, default headers, JSON parsing and how to tell the
structured FetchClientError apart from transport faults.
"""

import asyncio
import json
import logging

import httpx

from fdy_fetch_client import FetchClientError, create_client


async def example_get_and_post():
    """GET and POST against a JSON API."""
    print("=== GET / POST ===\n")

    async with create_client({
        "baseUrl": "https://jsonplaceholder.typicode.com",
        "headers": {"Accept": "application/json"},
    }) as client:
        response = await client.get("/todos/1", options={"timeout": 10})
        print(f"Status: {response.status_code}")
        print(f"Title: {response.data['title']}")

        created = await client.post(
            "/posts",
            json.dumps({"title": "hello", "body": "world", "userId": 1}),
            {"Content-Type": "application/json"},
        )
        print(f"Created id: {created.data['id']}")


async def example_error_handling():
    """Structured errors versus transport faults."""
    print("\n=== Error handling ===\n")

    client = create_client({"baseUrl": "https://httpbin.org"}, debug=True)
    try:
        await client.get("/status/404")
    except FetchClientError as e:
        print(f"HTTP error {e.status} ({e.category.value}): {e.data!r}")
    except httpx.TransportError as e:
        print(f"Network problem: {e}")
    finally:
        await client.aclose()


async def main():
    logging.basicConfig(level=logging.INFO)
    await example_get_and_post()
    await example_error_handling()


if __name__ == "__main__":
    asyncio.run(main())

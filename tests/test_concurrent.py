"""Tests that the server handles many concurrent requests correctly.

The app is async (FastAPI) and the store serializes every check-then-act
sequence, so many simultaneous requests must neither lose clicks nor hand
out the same short code twice.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_redirect_requests(self, client):
        """Many concurrent redirects of one short code are all counted."""
        create_resp = await client.post(
            "/shorturls",
            json={"url": "https://example.com/redirect-target"},
        )
        assert create_resp.status_code == 201
        short_code = create_resp.json()["shortCode"]

        concurrency = 150
        tasks = [
            client.get(f"/{short_code}", follow_redirects=False)
            for _ in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

        stats = (await client.get(f"/shorturls/{short_code}")).json()
        assert stats["clickCount"] == concurrency
        assert len(stats["visitors"]) == concurrency

    async def test_concurrent_shorten_requests(self, client):
        """Many concurrent creations with different URLs get unique short codes."""
        concurrency = 100
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [
            client.post("/shorturls", json={"url": url})
            for url in urls
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 201, f"Request {i}: status {r.status_code} body={r.text}"
            short_codes.append(r.json()["shortCode"])

        assert len(short_codes) == len(set(short_codes)), "All short codes must be unique under concurrency"

    async def test_concurrent_same_custom_code(self, client):
        """Only one of many concurrent requests for the same custom code succeeds."""
        concurrency = 50
        tasks = [
            client.post("/shorturls", json={"url": f"https://example.com/{i}", "shortcode": "contested"})
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks)

        statuses = [r.status_code for r in responses]
        assert statuses.count(201) == 1
        assert statuses.count(409) == concurrency - 1

    async def test_concurrent_mixed_read_after_write(self, client):
        """Concurrent redirects and stats reads always see a consistent record."""
        create_resp = await client.post(
            "/shorturls",
            json={"url": "https://example.com/concurrent-target", "shortcode": "mixed"},
        )
        assert create_resp.status_code == 201

        tasks = (
            [client.get("/mixed", follow_redirects=False) for _ in range(50)]
            + [client.get("/shorturls/mixed") for _ in range(50)]
        )
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            if r.status_code == 200:
                data = r.json()
                assert data["clickCount"] == len(data["visitors"])
            else:
                assert r.status_code == 302, f"Request {i}: status {r.status_code}"

        final = (await client.get("/shorturls/mixed")).json()
        assert final["clickCount"] == 50

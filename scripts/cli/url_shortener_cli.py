#!/usr/bin/env python3
"""
Command-line interface for URL shortener service.

Talks to a running service over HTTP (the store lives in the server process).

Usage:
    python url_shortener_cli.py shorten <url> [--validity MINUTES] [--shortcode CODE]
    python url_shortener_cli.py stats <short_code>
    python url_shortener_cli.py resolve <short_code>
    python url_shortener_cli.py health
"""

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, Optional

import httpx


class URLShortenerCLI:
    """Command-line client for the URL shortener API."""
    
    def __init__(self, base_url: str, timeout: float = 5.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize CLI.
        
        Args:
            base_url: Base URL of the running service
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)
    
    async def cleanup(self):
        """Close the HTTP client."""
        await self.client.aclose()
    
    @staticmethod
    def _print(payload: Dict[str, Any], ok: bool) -> int:
        print(json.dumps(payload, indent=2), file=sys.stdout if ok else sys.stderr)
        return 0 if ok else 1
    
    @staticmethod
    def _error(response: httpx.Response) -> str:
        try:
            return response.json().get("error", response.text)
        except ValueError:
            return response.text
    
    async def shorten(self, url: str, validity: Optional[float] = None, shortcode: Optional[str] = None) -> int:
        """Shorten a URL."""
        body: Dict[str, Any] = {"url": url}
        if validity is not None:
            body["validity"] = validity
        if shortcode:
            body["shortcode"] = shortcode
        
        try:
            response = await self.client.post("/shorturls", json=body)
        except httpx.HTTPError as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)
        
        if response.status_code != 201:
            return self._print({"success": False, "status": response.status_code, "error": self._error(response)}, ok=False)
        
        data = response.json()
        return self._print({
            "success": True,
            **data,
            "message": f"Successfully shortened URL to: {data['shortLink']}",
        }, ok=True)
    
    async def stats(self, short_code: str) -> int:
        """Get statistics for a short code."""
        try:
            response = await self.client.get(f"/shorturls/{short_code}")
        except httpx.HTTPError as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)
        
        if response.status_code != 200:
            return self._print({"success": False, "status": response.status_code, "error": self._error(response)}, ok=False)
        
        return self._print({"success": True, **response.json()}, ok=True)
    
    async def resolve(self, short_code: str) -> int:
        """Resolve a short code without following the redirect (counts as a click)."""
        try:
            response = await self.client.get(f"/{short_code}", follow_redirects=False)
        except httpx.HTTPError as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)
        
        if not response.is_redirect:
            return self._print({"success": False, "status": response.status_code, "error": self._error(response)}, ok=False)
        
        return self._print({
            "success": True,
            "short_code": short_code,
            "original_url": response.headers["location"],
        }, ok=True)
    
    async def health(self) -> int:
        """Check service health."""
        try:
            response = await self.client.get("/health")
        except httpx.HTTPError as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)
        
        data = response.json()
        healthy = response.status_code == 200 and data.get("status") == "healthy"
        return self._print({"success": healthy, "health": data}, ok=healthy)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL (valid for 30 minutes)
  %(prog)s shorten https://example.com/long/url
  
  # Shorten with validity and custom code
  %(prog)s shorten https://example.com/long/url --validity 60 --shortcode mylink
  
  # Get statistics
  %(prog)s stats mylink
  
  # Resolve (records a click)
  %(prog)s resolve mylink
  
  # Check health
  %(prog)s health
        """
    )
    
    parser.add_argument(
        "--base-url",
        default=os.getenv("BASE_URL", "http://localhost:3000"),
        help="Service base URL (default: from BASE_URL env or http://localhost:3000)"
    )
    
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    
    # Shorten command
    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--validity", type=float, help="Validity in minutes")
    shorten_parser.add_argument("--shortcode", help="Custom short code")
    
    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("short_code", help="Short code to get stats for")
    
    # Resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a short code")
    resolve_parser.add_argument("short_code", help="Short code to resolve")
    
    # Health command
    subparsers.add_parser("health", help="Check service health")
    
    return parser


async def main(argv=None, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    cli = URLShortenerCLI(base_url=args.base_url, timeout=args.timeout, transport=transport)
    
    try:
        if args.command == "shorten":
            return await cli.shorten(args.url, args.validity, args.shortcode)
        elif args.command == "stats":
            return await cli.stats(args.short_code)
        elif args.command == "resolve":
            return await cli.resolve(args.short_code)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)

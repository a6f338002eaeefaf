#!/usr/bin/env python3
"""
Command-line client for a running short-link service.

Short links live inside the server process, so the CLI talks to the
service over HTTP instead of opening a store of its own.

Usage:
    python short_link_cli.py shorten <url> (--user-id ID | --id-token JWT)
    python short_link_cli.py list (--user-id ID | --id-token JWT)
    python short_link_cli.py resolve <short_code>
    python short_link_cli.py health
"""

import argparse
import json
import sys
import os
from typing import Optional

import requests

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from shortlink.common.identity import owner_id_from_id_token
from shortlink.common.logging_config import setup_logging


class ShortLinkCLI:
    """Command-line interface for the short-link service."""

    def __init__(self, service_url: str, timeout: float = 5.0, verbose: bool = False):
        """Initialize CLI."""
        self.service_url = service_url.rstrip("/")
        self.timeout = timeout
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.session = requests.Session()

    def _print(self, payload: dict, ok: bool) -> int:
        print(json.dumps(payload, indent=2), file=sys.stdout if ok else sys.stderr)
        return 0 if ok else 1

    def _error_from(self, response: requests.Response) -> str:
        try:
            return response.json().get("error", response.text)
        except ValueError:
            return f"HTTP {response.status_code}: {response.text[:200]}"

    def shorten(self, url: str, user_id: str) -> int:
        """Shorten a URL for a user."""
        try:
            response = self.session.post(
                f"{self.service_url}/urls",
                json={"url": url, "userId": user_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)

        if response.status_code != 200:
            return self._print({"success": False, "error": self._error_from(response)}, ok=False)

        data = response.json()
        return self._print({
            "success": True,
            "short_code": data["shortCode"],
            "short_url": data["shortUrl"],
            "original_url": url,
            "message": f"Successfully shortened URL to: {data['shortCode']}"
        }, ok=True)

    def list_urls(self, user_id: str) -> int:
        """List the short links of a user."""
        try:
            response = self.session.get(
                f"{self.service_url}/urls",
                params={"userId": user_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)

        if response.status_code != 200:
            return self._print({"success": False, "error": self._error_from(response)}, ok=False)

        urls = response.json()["urls"]
        return self._print({
            "success": True,
            "count": len(urls),
            "urls": urls
        }, ok=True)

    def resolve(self, short_code: str) -> int:
        """Look up the original URL without following the redirect."""
        try:
            response = self.session.get(
                f"{self.service_url}/urls/{short_code}",
                allow_redirects=False,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)

        if response.status_code != 302:
            return self._print({"success": False, "error": self._error_from(response)}, ok=False)

        return self._print({
            "success": True,
            "short_code": short_code,
            "original_url": response.headers.get("Location")
        }, ok=True)

    def health(self) -> int:
        """Check service health and print statistics."""
        try:
            health = self.session.get(f"{self.service_url}/api/health", timeout=self.timeout)
            stats = self.session.get(f"{self.service_url}/api/stats", timeout=self.timeout)
        except requests.RequestException as e:
            return self._print({"success": False, "error": f"Request failed: {e}"}, ok=False)

        healthy = health.status_code == 200 and health.json().get("status") == "healthy"
        return self._print({
            "success": healthy,
            "health": health.json() if health.status_code == 200 else None,
            "statistics": stats.json() if stats.status_code == 200 else None
        }, ok=healthy)


def resolve_user_id(user_id: Optional[str], id_token: Optional[str]) -> str:
    """Pick the owner id from --user-id or the subject of --id-token."""
    if user_id:
        return user_id
    subject, _email = owner_id_from_id_token(id_token)
    return subject


def add_owner_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--user-id", help="Owner id (identity provider subject)")
    group.add_argument("--id-token", help="Identity token; its 'sub' claim is used as owner id")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Short Link CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url --user-id 1098765

  # List a user's URLs, taking the owner id from an identity token
  %(prog)s list --id-token eyJhbGciOi...

  # Look up where a short code points
  %(prog)s resolve 1a2b3c4d

  # Check health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--service-url",
        default=os.getenv("SHORT_LINK_URL", "http://localhost:9200"),
        help="Base URL of the service (default: from SHORT_LINK_URL env or http://localhost:9200)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    add_owner_arguments(shorten_parser)

    list_parser = subparsers.add_parser("list", help="List a user's URLs")
    add_owner_arguments(list_parser)

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL")
    resolve_parser.add_argument("short_code", help="Short code to lookup")

    subparsers.add_parser("health", help="Check service health")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    cli = ShortLinkCLI(service_url=args.service_url, verbose=args.verbose)

    if args.command in ("shorten", "list"):
        try:
            user_id = resolve_user_id(args.user_id, args.id_token)
        except ValueError as e:
            print(json.dumps({"success": False, "error": str(e)}, indent=2), file=sys.stderr)
            return 1
        cli.logger.debug(f"Using owner id {user_id}")

    if args.command == "shorten":
        return cli.shorten(args.url, user_id)
    elif args.command == "list":
        return cli.list_urls(user_id)
    elif args.command == "resolve":
        return cli.resolve(args.short_code)
    elif args.command == "health":
        return cli.health()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

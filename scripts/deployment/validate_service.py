#!/usr/bin/env python3
"""
Validation script for the short-link service.
Runs the create / list / redirect scenario against a live service.
"""

import sys
import time
import uuid
import requests
from typing import Optional
from datetime import datetime


class ServiceValidator:
    """Validates short-link service functionality."""

    def __init__(self, base_url: str = "http://localhost:9200"):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.test_results = []
        # Fresh owner so earlier runs against the same process don't leak in
        self.user_id = f"validator-{uuid.uuid4().hex[:8]}"

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "PASS" if passed else "FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def test_health_check(self) -> bool:
        """Test health check endpoint."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=5)
            if response.status_code == 200:
                data = response.json()
                is_healthy = data.get("status") == "healthy"
                self.print_test("Health Check", is_healthy, f"Store: {data.get('store')}")
                return is_healthy
            else:
                self.print_test("Health Check", False, f"Status: {response.status_code}")
                return False
        except requests.RequestException as e:
            self.print_test("Health Check", False, f"Error: {str(e)}")
            return False

    def test_create_short_url(self, target_url: str) -> Optional[str]:
        """Test creating a short URL."""
        try:
            response = self.session.post(
                f"{self.base_url}/urls",
                json={"url": target_url, "userId": self.user_id},
                timeout=5
            )

            if response.status_code == 200:
                data = response.json()
                short_code = data.get("shortCode", "")
                valid = len(short_code) == 8 and all(c in "0123456789abcdef" for c in short_code)
                self.print_test(
                    "Create Short URL",
                    valid,
                    f"Code: {short_code}, URL: {data.get('shortUrl')}"
                )
                return short_code if valid else None

            self.print_test("Create Short URL", False, f"Status: {response.status_code}")
            return None
        except requests.RequestException as e:
            self.print_test("Create Short URL", False, f"Error: {str(e)}")
            return None

    def test_list_urls(self, short_code: str) -> bool:
        """Test that the new code appears in the owner's list."""
        try:
            response = self.session.get(
                f"{self.base_url}/urls",
                params={"userId": self.user_id},
                timeout=5
            )

            if response.status_code == 200:
                codes = [item.get("shortCode") for item in response.json().get("urls", [])]
                listed = short_code in codes
                self.print_test("List User URLs", listed, f"Codes: {codes}")
                return listed
            else:
                self.print_test("List User URLs", False, f"Status: {response.status_code}")
                return False
        except requests.RequestException as e:
            self.print_test("List User URLs", False, f"Error: {str(e)}")
            return False

    def test_redirect(self, short_code: str, target_url: str) -> bool:
        """Test URL redirect functionality."""
        try:
            response = self.session.get(
                f"{self.base_url}/{short_code}",
                allow_redirects=False,
                timeout=5
            )

            location = response.headers.get("Location", "")
            is_redirect = response.status_code == 302 and location == target_url
            self.print_test(
                "URL Redirect",
                is_redirect,
                f"Redirects to: {location[:50]}" if location else "No Location header"
            )
            return is_redirect
        except requests.RequestException as e:
            self.print_test("URL Redirect", False, f"Error: {str(e)}")
            return False

    def test_invalid_url(self) -> bool:
        """Test invalid URL rejection."""
        try:
            response = self.session.post(
                f"{self.base_url}/urls",
                json={"url": "not-a-url", "userId": self.user_id},
                timeout=5
            )

            is_rejected = response.status_code == 400
            self.print_test(
                "Invalid URL Rejection",
                is_rejected,
                f"Status: {response.status_code} (expected 400)"
            )
            return is_rejected
        except requests.RequestException as e:
            self.print_test("Invalid URL Rejection", False, f"Error: {str(e)}")
            return False

    def test_missing_user_id(self) -> bool:
        """Test that listing without userId is rejected."""
        try:
            response = self.session.get(f"{self.base_url}/urls", timeout=5)

            is_rejected = response.status_code == 400
            self.print_test(
                "Missing userId Rejection",
                is_rejected,
                f"Status: {response.status_code} (expected 400)"
            )
            return is_rejected
        except requests.RequestException as e:
            self.print_test("Missing userId Rejection", False, f"Error: {str(e)}")
            return False

    def test_nonexistent_code(self) -> bool:
        """Test accessing non-existent short code."""
        try:
            response = self.session.get(
                f"{self.base_url}/zzzzzzzz",
                allow_redirects=False,
                timeout=5
            )

            is_not_found = response.status_code == 404
            self.print_test(
                "Non-existent Code",
                is_not_found,
                f"Status: {response.status_code} (expected 404)"
            )
            return is_not_found
        except requests.RequestException as e:
            self.print_test("Non-existent Code", False, f"Error: {str(e)}")
            return False

    def test_cors_preflight(self) -> bool:
        """Test OPTIONS preflight handling."""
        try:
            response = self.session.options(f"{self.base_url}/urls", timeout=5)

            ok = (
                response.status_code in (200, 204)
                and response.headers.get("Access-Control-Allow-Origin") == "*"
            )
            self.print_test("CORS Preflight", ok, f"Status: {response.status_code}")
            return ok
        except requests.RequestException as e:
            self.print_test("CORS Preflight", False, f"Error: {str(e)}")
            return False

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("Short Link Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        # Basic connectivity
        if not self.test_health_check():
            print("\nHealth check failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()

        # Core scenario
        target_url = f"https://example.com/validate/{int(time.time())}"
        short_code = self.test_create_short_url(target_url)
        if short_code:
            self.test_list_urls(short_code)
            self.test_redirect(short_code, target_url)

        print()

        # Error paths
        self.test_invalid_url()
        self.test_missing_user_id()
        self.test_nonexistent_code()
        self.test_cors_preflight()

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"Passed:       {passed}")
        print(f"Failed:       {failed}")
        print(f"Success Rate: {(passed/total*100):.1f}%")

        if failed > 0:
            print("\nFailed tests:")
            for name, passed in self.test_results:
                if not passed:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate short-link service functionality"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:9200",
        help="Base URL of the service (default: http://localhost:9200)"
    )

    args = parser.parse_args()

    validator = ServiceValidator(args.url)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\nValidation interrupted by user")
        sys.exit(2)


if __name__ == "__main__":
    main()

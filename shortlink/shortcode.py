"""Short code generation utilities."""

import secrets
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    def __init__(self, default_length: int = 8):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
        """
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random hexadecimal short code.

        Uses the operating system's cryptographically strong random source.
        Odd lengths draw one extra byte and drop the last character.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        num_bytes = (length + 1) // 2
        return secrets.token_hex(num_bytes)[:length]

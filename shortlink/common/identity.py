"""Identity token helpers.

The sign-in widget hands the browser a signed JWT. Clients read the
``sub`` claim and send it as ``userId``. These helpers perform the same
unverified decode for command-line clients; the server never verifies the
token and trusts the supplied ``userId`` as-is.
"""

from typing import Optional, Tuple

import jwt


def decode_id_token_payload(token: str) -> dict:
    """Decode the claims of a JWT without checking its signature.

    Raises:
        ValueError: If the token cannot be decoded
    """
    try:
        return jwt.decode(token.strip(), options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        raise ValueError(f"Invalid identity token: {e}") from e


def owner_id_from_id_token(token: str) -> Tuple[str, Optional[str]]:
    """Return (subject, email) from an identity token.

    Raises:
        ValueError: If the token is malformed or has no subject claim
    """
    claims = decode_id_token_payload(token)
    subject = claims.get("sub")
    if not subject:
        raise ValueError("Identity token has no 'sub' claim")
    return str(subject), claims.get("email")

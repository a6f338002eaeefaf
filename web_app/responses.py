"""Response helpers shared by the API and web routers."""

from urllib.parse import quote

from fastapi import status
from starlette.responses import Response

# Characters RedirectResponse also leaves alone
_LOCATION_SAFE = ":/%#?=@[]!$&'()*+,;"


def redirect_to(original_url: str) -> Response:
    """302 to the stored URL, unchanged.

    RedirectResponse percent-encodes its target, so Location would no longer
    match what the user submitted. Only URLs that cannot travel in a latin-1
    header are encoded.
    """
    try:
        original_url.encode("latin-1")
        location = original_url
    except UnicodeEncodeError:
        location = quote(original_url, safe=_LOCATION_SAFE)

    return Response(status_code=status.HTTP_302_FOUND, headers={"Location": location})

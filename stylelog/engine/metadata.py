"""
Request/response metadata extraction.

Reads everything the renderer needs from the ASGI scope and the
``http.response.start`` message, applying the display fallbacks for headers
the client or the application did not send.
"""

from starlette.datastructures import Headers
from starlette.types import Message, Scope

from stylelog.models.request_context import UNKNOWN_CLIENT, UNKNOWN_REFERER, RequestContext


def full_path(scope: Scope) -> str:
    """Request target + query string, as the client sent it (not percent-decoded)."""
    raw_path = scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1")
    else:
        path = scope.get("path", "")
        root_path = scope.get("root_path", "")
        # Newer servers already include root_path in path
        if root_path and not path.startswith(root_path):
            path = root_path + path
    query = scope.get("query_string", b"")
    if query:
        path = f"{path}?{query.decode('latin-1')}"
    return path


def client_address(scope: Scope) -> str:
    client = scope.get("client")
    return client[0] if client else UNKNOWN_CLIENT


def content_length(headers: Headers) -> int:
    """Parse ``content-length``; absent or malformed values count as 0."""
    raw = headers.get("content-length")
    if raw is None:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


def extract_context(
    scope: Scope,
    response_start: Message,
    elapsed_ms: int,
    timestamp: str,
) -> RequestContext:
    """Build the ``RequestContext`` for a completed request."""
    request_headers = Headers(scope=scope)
    response_headers = Headers(raw=response_start.get("headers", []))

    return RequestContext(
        method=scope["method"],
        path=full_path(scope),
        client_address=client_address(scope),
        user_agent=request_headers.get("user-agent"),
        referer=request_headers.get("referer") or UNKNOWN_REFERER,
        status_code=response_start["status"],
        content_length=content_length(response_headers),
        elapsed_ms=elapsed_ms,
        timestamp=timestamp,
    )

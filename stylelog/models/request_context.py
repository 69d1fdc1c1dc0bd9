"""
Per-request record handed from the metadata extractor to the renderer.

Built once the response has completed and dropped right after the log
line(s) are written. Optional headers carry their display fallbacks as
field defaults.
"""

from pydantic import BaseModel, Field

UNKNOWN_REFERER = "Unknown"
UNKNOWN_CLIENT = "unknown"


class RequestContext(BaseModel):
    """Metadata for a single completed request."""

    method: str
    path: str = Field(..., description="Full request path, including the query string.")
    client_address: str = UNKNOWN_CLIENT
    user_agent: str | None = Field(
        default=None,
        description="User-Agent header. May be absent.",
    )
    referer: str = UNKNOWN_REFERER
    status_code: int
    content_length: int = 0
    elapsed_ms: int = Field(..., ge=0)
    timestamp: str = Field(..., description="Local HH:MM:SS at completion.")

    model_config = {"frozen": True}

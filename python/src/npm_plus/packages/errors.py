"""
Upstream error types.
"""


class UpstreamError(Exception):
    """An upstream HTTP call did not succeed."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "", url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url

    @classmethod
    def from_status(cls, status_code: int, body: str, url: str = "") -> "UpstreamError":
        return cls(f"API error ({status_code}): {body}", status_code, body, url)


class VulnerabilityCheckError(UpstreamError):
    """Package metadata needed for a vulnerability check could not be fetched."""

    @classmethod
    def wrap(cls, cause: UpstreamError) -> "VulnerabilityCheckError":
        return cls(
            f"Could not fetch package info for vulnerability check: {cause}",
            cause.status_code,
            cause.body,
            cause.url,
        )

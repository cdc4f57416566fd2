"""Failure categories raised inside the pipelines.

Every public operation catches these at its boundary and renders them as
text; none of them reaches the caller.  Network failures are not wrapped:
they surface as ``httpx.TransportError`` subclasses.
"""

from typing import Optional


class PipelineError(Exception):
    """Base class for pipeline failures."""


class UpstreamStatusError(PipelineError):
    """The upstream endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class EmptyResultError(PipelineError):
    """A well-formed response carried no usable entries."""

    def __init__(self, message: str, raw_body: Optional[str] = None):
        super().__init__(message)
        self.raw_body = raw_body


class MalformedResponseError(PipelineError):
    """The response body could not be decoded into the domain model."""

    def __init__(self, message: str, raw_body: str):
        super().__init__(message)
        self.raw_body = raw_body

"""
Failures of the external structuring service.

The heuristic stages never raise on document content; only the LLM
round-trip can fail, and when it does the whole request fails.
"""


class StructuringError(RuntimeError):
    """Could not reach or parse the structuring service."""


class MalformedStructuringOutput(StructuringError):
    """The response held no fenced JSON block, or the block was not valid JSON."""


class UpstreamCallFailure(StructuringError):
    """The provider call itself failed (network, auth, rate limit, timeout)."""

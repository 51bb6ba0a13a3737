"""Application layer for mock-kata.

This layer contains the file sending use case and request/result models.
It defines ports (interfaces) for the collaborators of the file sender and
of the thing cache, which lives in the infrastructure layer.
"""

from .models import LookupResult, SendFilesRequest, SendFilesResult

__all__ = [
    "LookupResult",
    "SendFilesRequest",
    "SendFilesResult",
]

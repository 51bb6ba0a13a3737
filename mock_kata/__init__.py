"""mock-kata package.

Two small exercises for practicing mock-based unit testing:

- ThingCache: memoizes successful lookups against a backing thing service
- FileSender: recognizes, checks, signs and sends documents
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("mock-kata")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from mock_kata.application.file_sender import FileSender, FileSenderDependencies
from mock_kata.application.models import SendFilesResult
from mock_kata.infrastructure.caching.thing_cache import ThingCache
from mock_kata.domain.entities import Certificate, Document, File, Thing
from mock_kata.errors import InvalidArgumentError, MockKataError

__all__ = [
    "__version__",
    # Cache
    "ThingCache",
    "Thing",
    # File sending
    "FileSender",
    "FileSenderDependencies",
    "SendFilesResult",
    "Certificate",
    "Document",
    "File",
    # Errors
    "InvalidArgumentError",
    "MockKataError",
]

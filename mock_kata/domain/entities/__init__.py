"""Domain entities.

Things served by the cache and the file/document records handled by the
file sender.
"""

from .document import Certificate, Document, File
from .thing import Thing

__all__ = [
    "Certificate",
    "Document",
    "File",
    "Thing",
]

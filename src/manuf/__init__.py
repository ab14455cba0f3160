"""Local, periodically refreshed index of IEEE OUI assignments."""

__version__ = "0.3.0"

from .errors import (  # noqa: E402
    DeadlineExceeded,
    ManufError,
    NetworkError,
    ParseError,
    RemoteError,
    StorageError,
)
from .matcher import MatchStrategy, Matcher, find, find_record, lookup, normalize_address  # noqa: E402
from .records import Record, Records, Registry  # noqa: E402

__all__ = [
    "DeadlineExceeded",
    "ManufError",
    "MatchStrategy",
    "Matcher",
    "NetworkError",
    "ParseError",
    "Record",
    "Records",
    "Registry",
    "RemoteError",
    "StorageError",
    "__version__",
    "find",
    "find_record",
    "lookup",
    "normalize_address",
]

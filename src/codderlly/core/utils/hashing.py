"""Content hashing for exported articles"""

import hashlib


def sha256(content: str) -> str:
    """Return the hex SHA-256 digest of the UTF-8 encoded content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()

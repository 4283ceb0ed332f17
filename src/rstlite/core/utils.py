"""Small helpers for naming and fingerprinting parsed files"""

import hashlib
import re


def sha256(content: str) -> str:
    """Return the hex SHA-256 digest of content encoded as UTF-8."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated identifier safe for use as a file name."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    return re.sub(r'[\s_-]+', '-', text).strip('-') or 'document'

"""
Destination Filename Derivation

Turns the client-supplied filename into the basename an upload is stored under.
"""

import hashlib
import os
import secrets
import string
from enum import Enum
from typing import Optional


RANDOM_LENGTH = 16
RANDOM_ALPHABET = string.ascii_letters + string.digits


class NamingStrategy(Enum):
    """How the stored basename is derived from the upload"""
    ORIGINAL = "original"
    HASH = "hash"
    RANDOM = "random"
    TIMESTAMP = "timestamp"
    CUSTOM = "custom"


def original_stem(original_filename: Optional[str]) -> str:
    """Client filename without directory or extension ("a/b/photo.jpg" -> "photo")"""
    if not original_filename:
        return ""
    name = os.path.basename(original_filename.replace("\\", "/"))
    return os.path.splitext(name)[0]


def random_basename(length: int = RANDOM_LENGTH) -> str:
    """Random alphanumeric string"""
    return "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(length))


def derive_basename(
    strategy: NamingStrategy,
    original_filename: Optional[str],
    timestamp: int,
    hint: Optional[str] = None
) -> str:
    """
    Derive the stored basename for an upload.

    Args:
        strategy: Naming strategy from the upload config
        original_filename: Client-supplied filename, including extension
        timestamp: Current Unix timestamp (seconds)
        hint: Caller-supplied basename, used by NamingStrategy.CUSTOM only.
              Directory parts are stripped ("a/../cover" -> "cover")

    Returns:
        Basename without extension
    """
    if strategy is NamingStrategy.HASH:
        seed = f"{original_filename or ''}{timestamp}"
        return hashlib.md5(seed.encode("utf-8")).hexdigest()

    if strategy is NamingStrategy.RANDOM:
        return random_basename()

    if strategy is NamingStrategy.TIMESTAMP:
        return str(timestamp)

    if strategy is NamingStrategy.CUSTOM:
        # Only the final path segment of the hint; it must not leave the target directory
        name = os.path.basename(hint.replace("\\", "/")) if hint else ""
        if name not in ("", ".", ".."):
            return name

    return original_stem(original_filename)


def build_filename(basename: str, extension: Optional[str]) -> str:
    """Join basename and extension with a dot"""
    return f"{basename}.{extension or ''}"

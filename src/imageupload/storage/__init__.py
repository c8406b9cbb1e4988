"""Storage paths and filename derivation"""

from .filesystem import FileSystem, directory_portion, join_path, relative_to_root
from .naming import NamingStrategy, build_filename, derive_basename

__all__ = [
    "FileSystem",
    "NamingStrategy",
    "build_filename",
    "derive_basename",
    "directory_portion",
    "join_path",
    "relative_to_root",
]

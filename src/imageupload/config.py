"""
Upload Configuration

UploadConfig is built once (from a dict, or from IMAGEUPLOAD_* environment
variables) and handed to UploadOrchestrator. Dimension specs are validated here,
so the orchestrator never sees a malformed entry.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError
from .storage.naming import NamingStrategy


DEFAULT_LIBRARY = "gd"
DEFAULT_QUALITY = 90
DEFAULT_PUBLIC_ROOT = "public"
DEFAULT_BASE_PATH = "public/uploads/images"

SUPPORTED_LIBRARIES = ("gd", "imagick", "pillow")

# Accepted option names -> UploadConfig attribute
OPTION_ALIASES = {
    "library": "library",
    "quality": "quality",
    "path": "base_path",
    "basePath": "base_path",
    "base_path": "base_path",
    "publicRoot": "public_root",
    "public_path": "public_root",
    "public_root": "public_root",
    "newfilename": "naming_strategy",
    "namingStrategy": "naming_strategy",
    "naming_strategy": "naming_strategy",
    "dimensions": "dimensions",
    "suffix": "suffix_thumbnails",
    "suffixThumbnails": "suffix_thumbnails",
    "suffix_thumbnails": "suffix_thumbnails",
    "exif": "capture_exif",
    "captureExif": "capture_exif",
    "capture_exif": "capture_exif",
    "autoOrient": "auto_orient",
    "auto_orient": "auto_orient",
}

ENV_OPTIONS = {
    "LIBRARY": "library",
    "QUALITY": "quality",
    "PATH": "base_path",
    "PUBLIC_ROOT": "public_root",
    "NEWFILENAME": "naming_strategy",
    "DIMENSIONS": "dimensions",
    "SUFFIX": "suffix_thumbnails",
    "EXIF": "capture_exif",
    "AUTO_ORIENT": "auto_orient",
}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class DimensionSpec:
    """
    One thumbnail variant.

    Attributes:
        width: Target width in pixels
        height: Target height in pixels (None = same as width)
        squared: Crop to an exact square instead of fitting the box
    """
    width: int
    height: Optional[int] = None
    squared: bool = False

    def __post_init__(self):
        if not _is_size(self.width):
            raise ConfigError(f"Thumbnail width must be a positive integer, got {self.width!r}")
        if self.height is not None and not _is_size(self.height):
            raise ConfigError(f"Thumbnail height must be a positive integer, got {self.height!r}")

    @property
    def target_height(self) -> int:
        return self.height or self.width

    @classmethod
    def parse(cls, value: Any) -> Optional['DimensionSpec']:
        """
        Parse a dimension entry from config.

        Accepts [width], [width, height], [width, height, squared] or a dict with
        the same keys. Returns None for empty entries, which are skipped.
        """
        if isinstance(value, DimensionSpec):
            return value
        if not value:
            return None

        if isinstance(value, Mapping):
            unknown = set(value) - {"width", "height", "squared"}
            if unknown:
                raise ConfigError(f"Unknown dimension keys: {sorted(unknown)}")
            if "width" not in value:
                raise ConfigError("Dimension entry needs a width")
            return cls(
                width=value["width"],
                height=value.get("height") or None,
                squared=bool(value.get("squared", False)),
            )

        if isinstance(value, (list, tuple)):
            if len(value) > 3:
                raise ConfigError(f"Dimension entry has too many values: {value!r}")
            width = value[0]
            height = value[1] if len(value) > 1 else None
            squared = value[2] if len(value) > 2 else False
            return cls(width=width, height=height or None, squared=bool(squared))

        raise ConfigError(f"Invalid dimension entry: {value!r}")

    def to_list(self) -> list:
        return [self.width, self.height, self.squared]


@dataclass
class UploadConfig:
    """Options for UploadOrchestrator"""
    library: str = DEFAULT_LIBRARY
    quality: int = DEFAULT_QUALITY
    base_path: str = DEFAULT_BASE_PATH
    public_root: str = DEFAULT_PUBLIC_ROOT
    naming_strategy: NamingStrategy = NamingStrategy.ORIGINAL
    dimensions: Dict[str, DimensionSpec] = field(default_factory=dict)
    suffix_thumbnails: bool = True
    capture_exif: bool = False
    auto_orient: bool = False

    def __post_init__(self):
        if self.library not in SUPPORTED_LIBRARIES:
            raise ConfigError(
                f"Unsupported image library {self.library!r} "
                f"(expected one of {', '.join(SUPPORTED_LIBRARIES)})"
            )

        if isinstance(self.quality, bool) or not isinstance(self.quality, int):
            raise ConfigError(f"Quality must be an integer, got {self.quality!r}")
        if not 0 <= self.quality <= 100:
            raise ConfigError(f"Quality must be between 0 and 100, got {self.quality}")

        if not self.base_path:
            raise ConfigError("Upload base path must not be empty")

        if not isinstance(self.naming_strategy, NamingStrategy):
            try:
                self.naming_strategy = NamingStrategy(self.naming_strategy)
            except ValueError:
                raise ConfigError(f"Unknown naming strategy: {self.naming_strategy!r}")

        dimensions = {}
        for key, value in (self.dimensions or {}).items():
            key = str(key).strip()
            if not key:
                raise ConfigError("Thumbnail key must not be empty")
            spec = DimensionSpec.parse(value)
            if spec is not None:
                dimensions[key] = spec
        self.dimensions = dimensions

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'UploadConfig':
        """
        Create config from a mapping of option names.

        Both the camelCase names (basePath, namingStrategy, ...) and the short
        legacy names (path, newfilename, suffix, exif) are accepted.
        """
        kwargs = {}
        for name, value in data.items():
            attr = OPTION_ALIASES.get(name)
            if attr is None:
                raise ConfigError(f"Unknown config option: {name}")
            kwargs[attr] = value
        return cls(**kwargs)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = "IMAGEUPLOAD_"
    ) -> 'UploadConfig':
        """
        Create config from environment variables.

        Unset variables keep their defaults. IMAGEUPLOAD_DIMENSIONS holds a JSON
        object, e.g. {"thumb": [200, 200, true], "medium": [800]}.
        """
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        for suffix, attr in ENV_OPTIONS.items():
            raw = environ.get(prefix + suffix)
            if raw is None:
                continue

            if attr == "quality":
                try:
                    kwargs[attr] = int(raw)
                except ValueError:
                    raise ConfigError(f"{prefix}{suffix} must be an integer, got {raw!r}")
            elif attr == "dimensions":
                try:
                    kwargs[attr] = json.loads(raw) if raw.strip() else {}
                except ValueError as e:
                    raise ConfigError(f"{prefix}{suffix} is not valid JSON: {e}")
                if not isinstance(kwargs[attr], dict):
                    raise ConfigError(f"{prefix}{suffix} must be a JSON object")
            elif attr in ("suffix_thumbnails", "capture_exif", "auto_orient"):
                kwargs[attr] = _parse_bool(prefix + suffix, raw)
            else:
                kwargs[attr] = raw

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the camelCase option names"""
        return {
            "library": self.library,
            "quality": self.quality,
            "basePath": self.base_path,
            "publicRoot": self.public_root,
            "namingStrategy": self.naming_strategy.value,
            "dimensions": {k: v.to_list() for k, v in self.dimensions.items()},
            "suffixThumbnails": self.suffix_thumbnails,
            "captureExif": self.capture_exif,
            "autoOrient": self.auto_orient,
        }


def _is_size(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")

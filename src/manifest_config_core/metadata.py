"""Read-only manifest metadata bundle and the readers that populate it.

A :class:`MetadataSource` mirrors the accessor semantics of a platform
metadata bundle: typed getters fall back to a default when a key is absent
or holds a value of another type, and a separate existence check reports
whether a key is present at all.

Readers (external collaborators of the merger) build a source from:
1) TOML documents (top-level keys or a ``[meta-data]`` table)
2) JSON objects
3) ``AndroidManifest.xml`` ``<meta-data>`` entries

Any failure to produce a usable source surfaces as
:class:`ConfigSourceUnavailableError`.
"""

import json
import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from .errors import ConfigSourceUnavailableError, MetadataTypeError

# Conditional TOML import: stdlib tomllib (3.11+) or fallback tomli (<3.11)
try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

MetadataValue = Union[str, bool, int]

ANDROID_NS = "http://schemas.android.com/apk/res/android"
META_DATA_TABLE = "meta-data"

_INT_LITERAL = re.compile(r"^[+-]?(0[xX][0-9a-fA-F]+|\d+)$")


class MetadataSource(Mapping):
    """Immutable key/value bundle of manifest metadata."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        data: Dict[str, Optional[MetadataValue]] = {}
        for key, value in (values or {}).items():
            if value is not None and not isinstance(value, (str, bool, int)):
                raise MetadataTypeError(key, value)
            data[str(key)] = value
        self._data = data

    def __getitem__(self, key: str) -> Optional[MetadataValue]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MetadataSource({self._data!r})"

    def contains_key(self, key: str) -> bool:
        """Return True if ``key`` is present, whatever its value."""
        return key in self._data

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the string stored under ``key``.

        Falls back to ``default`` when the key is absent, holds ``None`` or
        holds a non-string. An explicit empty string is returned as-is.
        """
        value = self._data.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            self._type_warning(key, value, "str", default)
            return default
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            self._type_warning(key, value, "bool", default)
            return default
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._data.get(key)
        if value is None:
            return default
        # bool is an int subclass but never a valid integer value here
        if isinstance(value, bool) or not isinstance(value, int):
            self._type_warning(key, value, "int", default)
            return default
        return value

    def to_dict(self) -> Dict[str, Optional[MetadataValue]]:
        return dict(self._data)

    @staticmethod
    def _type_warning(key: str, value: Any, expected: str, default: Any) -> None:
        logger.warning(
            "Key %s expected %s but value was a %s. The default value %r was returned.",
            key,
            expected,
            type(value).__name__,
            default,
        )


def _from_flat_mapping(data: Any, source: Path) -> MetadataSource:
    if not isinstance(data, dict):
        raise ConfigSourceUnavailableError(source, "metadata must be a table of key/value pairs")
    try:
        return MetadataSource(data)
    except MetadataTypeError as e:
        raise ConfigSourceUnavailableError(source, str(e)) from e


def read_metadata_toml(path: Path) -> MetadataSource:
    """Read metadata from a TOML file.

    Keys may sit at the top level or inside a ``[meta-data]`` table; dotted
    key names must be quoted.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigSourceUnavailableError(path, str(e)) from e
    if META_DATA_TABLE in data:
        ignored = sorted(key for key in data if key != META_DATA_TABLE)
        if ignored:
            logger.warning(
                "Ignoring top-level keys outside [%s] in %s: %s",
                META_DATA_TABLE,
                path,
                ", ".join(ignored),
            )
        data = data[META_DATA_TABLE]
    return _from_flat_mapping(data, path)


def read_metadata_json(path: Path) -> MetadataSource:
    """Read metadata from a JSON object of flat key/value pairs."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigSourceUnavailableError(path, str(e)) from e
    return _from_flat_mapping(data, path)


def coerce_manifest_value(raw: str) -> MetadataValue:
    """Coerce an ``android:value`` literal the way the resource compiler does."""
    text = raw.strip()
    if text == "true":
        return True
    if text == "false":
        return False
    if _INT_LITERAL.match(text):
        return int(text, 0) if text.lstrip("+-").lower().startswith("0x") else int(text)
    return raw


def read_android_manifest(path: Path) -> MetadataSource:
    """Collect ``<application><meta-data>`` entries from an AndroidManifest.xml."""
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as e:
        raise ConfigSourceUnavailableError(path, str(e)) from e

    application = tree.getroot().find("application")
    if application is None:
        raise ConfigSourceUnavailableError(path, "no <application> element")

    name_attr = f"{{{ANDROID_NS}}}name"
    value_attr = f"{{{ANDROID_NS}}}value"
    values: Dict[str, MetadataValue] = {}
    for node in application.findall("meta-data"):
        name = node.get(name_attr)
        if not name:
            continue
        raw = node.get(value_attr)
        if raw is None:
            # android:resource entries are not bundle values
            logger.debug("Skipping meta-data %s without android:value", name)
            continue
        values[name] = coerce_manifest_value(raw)
    return MetadataSource(values)


def read_metadata(path: Union[str, Path]) -> MetadataSource:
    """Read a metadata source, choosing the reader by file suffix."""
    path = Path(path)
    if not path.exists():
        raise ConfigSourceUnavailableError(path, "file not found")

    suffix = path.suffix.lower()
    if suffix == ".toml":
        source = read_metadata_toml(path)
    elif suffix == ".json":
        source = read_metadata_json(path)
    elif suffix == ".xml":
        source = read_android_manifest(path)
    else:
        raise ConfigSourceUnavailableError(path, f"unsupported metadata format '{suffix}'")

    logger.debug("Read %d metadata entries from %s", len(source), path)
    return source

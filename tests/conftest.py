import json
import logging

from pathlib import Path
from typing import Any, Dict, Optional

import pytest
from hypothesis import settings

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("manifest-config-tests", database=None)
settings.load_profile("manifest-config-tests")

NS = "com.bugsnag.android"


def ns(name: str) -> str:
    return f"{NS}.{name}"


def write_metadata_json(path: Path, values: Dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


def write_android_manifest(
    path: Path,
    entries: Dict[str, str],
    *,
    resources: Optional[Dict[str, str]] = None,
) -> Path:
    """Write a minimal AndroidManifest.xml with <meta-data> entries.

    Args:
        path: Destination file.
        entries: Mapping of meta-data name -> android:value literal.
        resources: Mapping of meta-data name -> android:resource reference.

    Returns:
        Path to the written manifest.
    """
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<manifest xmlns:android="http://schemas.android.com/apk/res/android" package="com.example">',
        "    <application>",
    ]
    for name, value in entries.items():
        lines.append(f'        <meta-data android:name="{name}" android:value="{value}"/>')
    for name, ref in (resources or {}).items():
        lines.append(f'        <meta-data android:name="{name}" android:resource="{ref}"/>')
    lines.extend(["    </application>", "</manifest>", ""])

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_library_logger():
    """CLI invocations attach a stderr handler to the library logger; drop it after each test."""
    yield
    logger = logging.getLogger("manifest_config_core")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

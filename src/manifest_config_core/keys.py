"""Namespaced metadata keys read from the application manifest."""

from typing import Dict, Tuple

NAMESPACE = "com.bugsnag.android"

# mandatory
API_KEY = f"{NAMESPACE}.API_KEY"
BUILD_UUID = f"{NAMESPACE}.BUILD_UUID"

# detection
AUTO_DETECT_ERRORS = f"{NAMESPACE}.AUTO_DETECT_ERRORS"
AUTO_DETECT_ANRS = f"{NAMESPACE}.AUTO_DETECT_ANRS"
AUTO_DETECT_NDK_CRASHES = f"{NAMESPACE}.AUTO_DETECT_NDK_CRASHES"
AUTO_TRACK_SESSIONS = f"{NAMESPACE}.AUTO_TRACK_SESSIONS"
SEND_THREADS = f"{NAMESPACE}.SEND_THREADS"
PERSIST_USER = f"{NAMESPACE}.PERSIST_USER"

# endpoints
ENDPOINT_NOTIFY = f"{NAMESPACE}.ENDPOINT"
ENDPOINT_SESSIONS = f"{NAMESPACE}.SESSIONS_ENDPOINT"

# app/project packages
APP_VERSION = f"{NAMESPACE}.APP_VERSION"
VERSION_CODE = f"{NAMESPACE}.VERSION_CODE"
RELEASE_STAGE = f"{NAMESPACE}.RELEASE_STAGE"
ENABLED_RELEASE_STAGES = f"{NAMESPACE}.ENABLED_RELEASE_STAGES"
IGNORE_CLASSES = f"{NAMESPACE}.IGNORE_CLASSES"
PROJECT_PACKAGES = f"{NAMESPACE}.PROJECT_PACKAGES"
REDACTED_KEYS = f"{NAMESPACE}.REDACTED_KEYS"

# misc
MAX_BREADCRUMBS = f"{NAMESPACE}.MAX_BREADCRUMBS"
LAUNCH_CRASH_THRESHOLD_MS = f"{NAMESPACE}.LAUNCH_CRASH_THRESHOLD_MS"
CODE_BUNDLE_ID = f"{NAMESPACE}.CODE_BUNDLE_ID"
APP_TYPE = f"{NAMESPACE}.APP_TYPE"

# deprecated aliases
ENABLE_EXCEPTION_HANDLER = f"{NAMESPACE}.ENABLE_EXCEPTION_HANDLER"

DEPRECATED_ALIASES: Dict[str, str] = {
    ENABLE_EXCEPTION_HANDLER: AUTO_DETECT_ERRORS,
}

# Expected value type per key, used by inspection tooling.
KEY_TYPES: Dict[str, type] = {
    API_KEY: str,
    BUILD_UUID: str,
    AUTO_DETECT_ERRORS: bool,
    AUTO_DETECT_ANRS: bool,
    AUTO_DETECT_NDK_CRASHES: bool,
    AUTO_TRACK_SESSIONS: bool,
    SEND_THREADS: bool,
    PERSIST_USER: bool,
    ENDPOINT_NOTIFY: str,
    ENDPOINT_SESSIONS: str,
    APP_VERSION: str,
    VERSION_CODE: int,
    RELEASE_STAGE: str,
    ENABLED_RELEASE_STAGES: str,
    IGNORE_CLASSES: str,
    PROJECT_PACKAGES: str,
    REDACTED_KEYS: str,
    MAX_BREADCRUMBS: int,
    LAUNCH_CRASH_THRESHOLD_MS: int,
    CODE_BUNDLE_ID: str,
    APP_TYPE: str,
    ENABLE_EXCEPTION_HANDLER: bool,
}

ALL_KEYS: Tuple[str, ...] = tuple(KEY_TYPES)


def is_namespaced(key: str) -> bool:
    return key.startswith(f"{NAMESPACE}.")

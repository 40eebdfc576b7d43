"""Configuration record produced by merging manifest metadata."""

from typing import Any, Dict, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NOTIFY_ENDPOINT = "https://notify.bugsnag.com"
DEFAULT_SESSIONS_ENDPOINT = "https://sessions.bugsnag.com"
DEFAULT_APP_TYPE = "android"
DEFAULT_MAX_BREADCRUMBS = 25
DEFAULT_LAUNCH_CRASH_THRESHOLD_MS = 5000
DEFAULT_REDACTED_KEYS = frozenset({"password"})


class EndpointConfiguration(BaseModel):
    """Notify and sessions URLs, replaced as a pair."""

    notify: str = Field(default=DEFAULT_NOTIFY_ENDPOINT, description="Error ingestion endpoint")
    sessions: str = Field(default=DEFAULT_SESSIONS_ENDPOINT, description="Session tracking endpoint")

    model_config = ConfigDict(frozen=True)


class Configuration(BaseModel):
    """Crash-reporting client configuration with built-in defaults."""

    # identity
    api_key: str = Field(..., description="Mandatory API key")
    build_uuid: Optional[str] = Field(default=None)

    # detection
    auto_detect_errors: bool = Field(default=True)
    auto_detect_anrs: bool = Field(default=True)
    auto_detect_ndk_crashes: bool = Field(default=True)
    auto_track_sessions: bool = Field(default=True)
    send_threads: bool = Field(default=True)
    persist_user: bool = Field(default=False)

    # endpoints
    endpoints: EndpointConfiguration = Field(default_factory=EndpointConfiguration)

    # app/project
    release_stage: Optional[str] = Field(default=None)
    app_version: Optional[str] = Field(default=None)
    app_type: Optional[str] = Field(default=DEFAULT_APP_TYPE)
    code_bundle_id: Optional[str] = Field(default=None)
    version_code: Optional[int] = Field(default=0)
    enabled_release_stages: Optional[Set[str]] = Field(
        default=None, description="None enables every release stage"
    )
    ignore_classes: Set[str] = Field(default_factory=set)
    project_packages: Set[str] = Field(default_factory=set)
    redacted_keys: Set[str] = Field(default_factory=lambda: set(DEFAULT_REDACTED_KEYS))

    # misc
    max_breadcrumbs: int = Field(default=DEFAULT_MAX_BREADCRUMBS)
    launch_crash_threshold_ms: int = Field(default=DEFAULT_LAUNCH_CRASH_THRESHOLD_MS)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view: sets become sorted lists, None values are kept."""
        data = self.model_dump()
        for key, value in data.items():
            if isinstance(value, set):
                data[key] = sorted(value)
        return data

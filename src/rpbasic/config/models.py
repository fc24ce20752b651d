#
# config/models.py
#
"""
Attrs-based data models for rpbasic configuration.
"""

from typing import Any

from attrs import define, field

BASE_URI_TEMPLATE = "{host}/api/"


# --- Validators ---
def _validate_not_blank(inst: Any, attr: Any, value: str) -> None:
    """Validator ensures a required string option is present."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Field '{attr.name}' must be a non-empty string, got {value!r}")


def _validate_positive_number(inst: Any, attr: Any, value: float) -> None:
    if not isinstance(value, int | float) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be a positive number, got {value}")


@define(frozen=True, slots=True)
class ReportPortalConfig:
    """Connection settings for a ReportPortal project."""

    uuid: str = field(validator=_validate_not_blank, repr=False)  # Bearer token
    host: str = field(validator=_validate_not_blank)
    project_name: str = field(validator=_validate_not_blank)
    time_zone: str = field(default="")  # Suffix appended to every timestamp, e.g. "+03:00"
    endpoint_url: str | None = field(default=None)
    # Error statuses must come back as responses for conflict recovery to inspect them.
    allow_http_errors: bool = field(default=True)
    verify_ssl: bool = field(default=True)
    timeout: float = field(default=60.0, validator=_validate_positive_number)

    @property
    def base_uri(self) -> str:
        """Endpoint all API paths are resolved against."""
        if self.endpoint_url:
            return self.endpoint_url if self.endpoint_url.endswith("/") else f"{self.endpoint_url}/"
        return BASE_URI_TEMPLATE.format(host=self.host.rstrip("/"))

    @property
    def project_path(self) -> str:
        """Relative path prefix of the project scoped API."""
        return f"v1/{self.project_name}"


# 🔼⚙️

"""Task ledger configuration.

Environment variable overrides for deployment tuning. The level table and
the task lifecycle are fixed and deliberately absent from configuration.

Environment Variables:
- TASK_LEDGER_ENVIRONMENT: 'production' (JSON logs) or 'development' (default: production)
- TASK_LEDGER_SERVICE_NAME: Service label on metrics (default: task-ledger)
- TASK_LEDGER_METRICS_ENABLED: Record Prometheus counters (default: true)
- TASK_LEDGER_MAX_TITLE_LENGTH: Reject longer titles, 0 disables (default: 0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class LedgerConfig:
    """Configuration for the task ledger runtime.

    Attributes:
        environment: Logging mode, 'production' or 'development'.
        service_name: Value of the ``service`` label on metrics.
        metrics_enabled: Whether the service records Prometheus counters.
        max_title_length: Title ceiling enforced by the service, 0 for none.
    """

    environment: str = "production"
    service_name: str = "task-ledger"
    metrics_enabled: bool = True
    max_title_length: int = 0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if not self.service_name:
            raise ValueError("service_name must not be empty")
        if self.max_title_length < 0:
            raise ValueError(
                f"max_title_length must be non-negative, got {self.max_title_length}"
            )

    @classmethod
    def from_environment(cls) -> LedgerConfig:
        """Create config from environment variables with defaults.

        Returns:
            LedgerConfig with values from environment or defaults.
        """
        return cls(
            environment=_get_str_env("TASK_LEDGER_ENVIRONMENT", "production").lower(),
            service_name=_get_str_env("TASK_LEDGER_SERVICE_NAME", "task-ledger"),
            metrics_enabled=_get_bool_env("TASK_LEDGER_METRICS_ENABLED", True),
            max_title_length=_get_int_env("TASK_LEDGER_MAX_TITLE_LENGTH", 0),
        )


# Default production config
DEFAULT_LEDGER_CONFIG = LedgerConfig()

# Development config for local runs and tests
DEVELOPMENT_LEDGER_CONFIG = LedgerConfig(environment="development", metrics_enabled=False)

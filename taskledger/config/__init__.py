"""Configuration module for the task ledger.

Available Configurations:
- LedgerConfig: logging mode, metrics and title ceiling
"""

from taskledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    DEVELOPMENT_LEDGER_CONFIG,
    LedgerConfig,
)

__all__ = [
    "LedgerConfig",
    "DEFAULT_LEDGER_CONFIG",
    "DEVELOPMENT_LEDGER_CONFIG",
]

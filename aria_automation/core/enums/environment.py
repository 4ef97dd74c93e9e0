"""Runtime environment types.

Used by Settings to pick the log renderer:
- DEVELOPMENT: human-readable console output
- TESTING / CI: JSON lines for machine parsing
- PRODUCTION: JSON lines, INFO level
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

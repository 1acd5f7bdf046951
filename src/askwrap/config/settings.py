"""Environment-driven settings for the askwrap CLI.

Values come from ``ASKWRAP_*`` environment variables, falling back to
the defaults declared here.  The CLI reads them once per invocation.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class AskwrapSettings(BaseSettings):
    """Process-level switches that do not belong on the command line."""

    model_config = SettingsConfigDict(env_prefix="ASKWRAP_", extra="ignore")

    verbose: bool = False
    """Enable DEBUG logging for the ``askwrap`` logger."""

    log_json: bool = False
    """Emit log records as JSON lines instead of console output."""

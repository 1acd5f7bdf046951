"""Runtime configuration — environment settings and logging setup."""

from askwrap.config.logging import configure_logging
from askwrap.config.settings import AskwrapSettings

__all__: list[str] = ["AskwrapSettings", "configure_logging"]

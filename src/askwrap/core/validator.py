"""Subcommand validation against the host's registered commands."""

from __future__ import annotations

import structlog

from askwrap.core.protocols import HostApp

logger = structlog.get_logger(__name__)

SUBCOMMAND_INDEX = 2


def invoked_name(app: HostApp) -> str | None:
    """Return the subcommand name from ``app.raw_args``, if present."""
    raw_args = app.raw_args
    if len(raw_args) <= SUBCOMMAND_INDEX:
        return None
    return raw_args[SUBCOMMAND_INDEX]


def validate(app: HostApp) -> bool:
    """Check the invoked subcommand against ``app.commands``.

    Returns ``True`` when the name matches a registered command exactly.
    Otherwise calls ``app.help()`` once and returns ``False``; exiting
    is left to the host.
    """
    name = invoked_name(app)
    if name is not None and any(cmd.name == name for cmd in app.commands):
        return True

    logger.debug("unknown subcommand", name=name)
    app.help()
    return False

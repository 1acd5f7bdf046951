"""Allow ``python -m askwrap`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m askwrap`` behaves identically to the ``askwrap``
console script.
"""

from __future__ import annotations

from askwrap.cli.app import cli

if __name__ == "__main__":
    cli()

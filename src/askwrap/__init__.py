"""askwrap — interactive answer collection and uniform command output.

Gathers values from the user, reconciles them against what is already
known, and renders command outcomes with predictable exit codes.
"""

from askwrap.version import __version__

__all__: list[str] = ["__version__"]

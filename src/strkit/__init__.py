"""strkit: line-oriented string manipulation from the command line.

Subcommands operate on argv operands and, when standard input is a
pipe, on every piped line.
"""

from strkit.version import __version__

__all__: list[str] = ["__version__"]

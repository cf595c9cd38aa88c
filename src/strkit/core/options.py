"""Short-flag option parsing shared by ``sub``, ``sub0`` and ``pad``.

The parser is deliberately small: flags are single letters, a flag
takes either no value or exactly one, and parsing stops at the first
argument that is not a flag.  Values may be attached to the flag
(``-w5``, ``-s-5``) or given as the next token (``-w 5``, ``-s -5``);
the next token is consumed verbatim even when it starts with ``-``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from strkit.core.models import OptionSpec
from strkit.exceptions import OptionParseError

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


def signed_int(raw: str) -> int:
    """Convert a signed decimal literal, rejecting anything ``int`` is lenient about."""
    if _SIGNED_INT.fullmatch(raw) is None:
        raise ValueError(f"not a signed decimal integer: {raw!r}")
    return int(raw)


def initial_options(
    specs: Sequence[OptionSpec],
    preset: Mapping[str, object] | None = None,
) -> dict[str, object]:
    """Build the option map before any argument is parsed.

    Pre-seeded values win over declared defaults.  Presence-only flags
    default to ``False``; value flags whose default is ``None`` are left
    out of the map entirely.
    """
    options: dict[str, object] = dict(preset or {})
    for spec in specs:
        if spec.dest in options:
            continue
        if not spec.takes_value:
            options[spec.dest] = False
        elif spec.default is not None:
            options[spec.dest] = spec.default
    return options


def _convert(spec: OptionSpec, raw: str) -> object:
    try:
        return spec.convert(raw)
    except ValueError as exc:
        raise OptionParseError(
            f"invalid value for {spec.switch}: {raw!r}",
            hint=f"{spec.switch} expects a signed integer.",
        ) from exc


def parse_options(
    args: Sequence[str],
    specs: Sequence[OptionSpec],
    *,
    preset: Mapping[str, object] | None = None,
    strict: bool = True,
) -> tuple[dict[str, object], list[str]]:
    """Parse leading flags from *args*.

    Returns
    -------
    tuple[dict[str, object], list[str]]
        The option map and the arguments left over once every parsed
        flag (and its value) has been removed.

    Raises
    ------
    OptionParseError
        On an unknown flag (silent when *strict* is ``False``), a value
        flag without a value, or a value its converter rejects.
    """
    by_flag = {spec.flag: spec for spec in specs}
    options = initial_options(specs, preset)

    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            index += 1
            break
        if arg == "-" or not arg.startswith("-"):
            break

        spec = by_flag.get(arg[1])
        if spec is None or (not spec.takes_value and len(arg) > 2):
            raise OptionParseError(f"bad option: {arg}", silent=not strict)

        if not spec.takes_value:
            options[spec.dest] = True
            index += 1
            continue

        if len(arg) > 2:
            raw = arg[2:]
            index += 1
        elif index + 1 < len(args):
            raw = args[index + 1]
            index += 2
        else:
            raise OptionParseError(f"missing argument for option: {spec.switch}")

        options[spec.dest] = _convert(spec, raw)

    return options, list(args[index:])

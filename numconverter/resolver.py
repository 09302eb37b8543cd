from dataclasses import dataclass
from typing import Dict, List, Literal, Sequence


ResolutionKind = Literal["alias", "shifted", "bare"]

BASE_ALIASES: Dict[str, int] = {
    "b": 2,
    "o": 8,
    "d": 10,
    "h": 16,
    "x": 16,
}


@dataclass(frozen=True)
class ResolvedInput:
    base: int
    literal: str | None
    to_bases: List[str]
    kind: ResolutionKind


def get_from_base(base_char: str) -> int | None:
    return BASE_ALIASES.get(base_char)


def get_bases(
    from_base_char: str,
    from_num: str | None,
    from_base: int,
    to_bases: Sequence[str],
) -> ResolvedInput:
    """Work out which positional argument is the number and which base it is in.

    The leading alias letter is optional, so when it is missing every
    positional argument sits one slot to the left of where argparse put it:
    ``from_base_char`` holds the number and ``from_num`` holds the first
    output base. In that case the number is read in ``from_base`` and
    ``from_num`` goes back to the front of the output bases.
    """
    alias_base = get_from_base(from_base_char)
    if alias_base is not None:
        return ResolvedInput(alias_base, from_num, list(to_bases), "alias")

    if from_num is not None:
        return ResolvedInput(from_base, from_base_char, [from_num, *to_bases], "shifted")

    return ResolvedInput(from_base, from_base_char, list(to_bases), "bare")

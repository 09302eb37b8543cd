import argparse
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConverterConfig:
    """Every command line option of a single invocation."""

    from_base_char: str
    from_num: str | None = None
    to_bases: tuple[str, ...] = field(default_factory=tuple)
    pad: int = 0
    sep_length: int = 4
    sep_char: str = "_"
    no_sep: bool = False
    from_base: int = 10
    silent: bool = False
    bare: bool = False
    verbosity: int = 0

    @property
    def grouping_enabled(self) -> bool:
        return not self.no_sep and self.sep_length > 0

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ConverterConfig":
        return cls(
            from_base_char=args.from_base_char,
            from_num=args.from_num,
            to_bases=tuple(args.to_bases),
            pad=args.pad,
            sep_length=args.sep_length,
            sep_char=args.sep_char,
            no_sep=args.no_sep,
            from_base=args.from_base,
            silent=args.silent,
            bare=args.bare,
            verbosity=args.verbosity,
        )

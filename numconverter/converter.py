import string

from .config import ConverterConfig
from .errors import BaseConversionError, InputBaseError, TargetBaseError


DIGITS = string.digits + string.ascii_uppercase
# ASCII only, lowercase letters map to the same values as uppercase
DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}
DIGIT_VALUES.update({ch.lower(): i for i, ch in enumerate(DIGITS) if ch.isalpha()})
MAX_VALUE = 2**128 - 1

MIN_BASE = 2
MAX_INPUT_BASE = 36
MAX_OUTPUT_BASE = 33

DEFAULT_TO_BASES = ("2", "8", "10", "16")


def convert_to_base_10(from_num: str | None, from_base: int, sep_char: str = "_") -> int:
    if not from_num:
        raise InputBaseError("no number to convert was provided")

    if not MIN_BASE <= from_base <= MAX_INPUT_BASE:
        raise InputBaseError(
            f"Invalid input base {from_base}. Base must be between "
            f"{MIN_BASE} and {MAX_INPUT_BASE} inclusive"
        )

    cleaned = from_num.replace(sep_char, "")
    if not cleaned:
        raise BaseConversionError(f"Could not convert {from_num!r} from base {from_base}")

    value = 0
    for ch in cleaned:
        digit = DIGIT_VALUES.get(ch, -1)
        if not 0 <= digit < from_base:
            raise BaseConversionError(f"Could not convert {cleaned} from base {from_base}")
        value = value * from_base + digit
        if value > MAX_VALUE:
            raise BaseConversionError(
                f"Could not convert {cleaned} from base {from_base}: "
                f"value does not fit in 128 bits"
            )

    return value


def parse_target_base(text: str) -> int:
    # str.isdigit() also accepts non-ASCII digits like "²"
    if not text or not all(ch in string.digits for ch in text):
        raise TargetBaseError(
            f"Error with target base {text}. Please provide target base in base 10."
        )
    return int(text)


def as_string_base(num: int, base: int) -> str:
    if not MIN_BASE <= base <= MAX_OUTPUT_BASE:
        raise TargetBaseError(
            f"Invalid Base {base}. Base must be between "
            f"{MIN_BASE} and {MAX_OUTPUT_BASE} inclusive"
        )

    if num == 0:
        return "0"

    digits = []
    while num > 0:
        num, digit = divmod(num, base)
        digits.append(DIGITS[digit])

    return "".join(reversed(digits))


def group_digits(digits: str, sep_char: str, sep_length: int) -> str:
    """Insert ``sep_char`` every ``sep_length`` characters, counted from the right."""
    if sep_length <= 0:
        return digits

    head = len(digits) % sep_length or sep_length
    groups = [digits[:head]]
    for i in range(head, len(digits), sep_length):
        groups.append(digits[i:i + sep_length])

    return sep_char.join(groups)


def pad_digits(digits: str, pad: int) -> str:
    return digits.rjust(pad, "0")


def format_number(num: int, base: int, config: ConverterConfig) -> str:
    out = pad_digits(as_string_base(num, base), config.pad)
    if config.grouping_enabled:
        out = group_digits(out, config.sep_char, config.sep_length)
    return out

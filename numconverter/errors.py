class NumConverterError(Exception):
    label = "Error"
    exit_code = 1

    def __str__(self) -> str:
        return self.args[0] if self.args else self.label


class InputBaseError(NumConverterError):
    """No number to convert, or the input base is not a usable radix."""

    label = "Input Base Error"
    exit_code = 3


class TargetBaseError(NumConverterError):
    """A requested output base is not base 10 or cannot be rendered."""

    label = "Target Base Error"
    exit_code = 4


class BaseConversionError(NumConverterError):
    """The number has digits outside its base or does not fit in 128 bits."""

    label = "Base Conversion Error"
    exit_code = 5

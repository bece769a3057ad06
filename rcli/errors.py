"""
rcli.errors

Exception types raised by the password generator and the csv converter.
Everything derives from ValueError: every failure here is caused by input the
caller has to correct before trying again.
"""


class RcliError(ValueError):
    """Base class for all rcli errors."""


# --- password generation ---

class GenerationError(RcliError):
    """Password generation failed."""


class ConfigError(GenerationError):
    """The composition config cannot produce a valid password."""


class EmptyLength(ConfigError):
    def __init__(self, length: int = 0):
        self.length = length
        if length < 0:
            msg = f"Password length cannot be negative (got {length})"
        else:
            msg = "Password length cannot be zero"
        super().__init__(msg)


class LengthTooLong(ConfigError):
    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Password length cannot exceed {limit} characters (got {length})")


class NoClassSelected(ConfigError):
    def __init__(self):
        super().__init__("At least one character type must be selected")


class LengthBelowClassCount(ConfigError):
    def __init__(self, length: int, required: int):
        self.length = length
        self.required = required
        super().__init__(
            f"Password length {length} is too short for {required} required character types"
        )


class InvalidCopies(ConfigError):
    def __init__(self, copies: int):
        self.copies = copies
        super().__init__(f"Number of passwords must be at least 1 (got {copies})")


class AssemblyError(GenerationError):
    """The character catalog is broken."""


class EmptyPool(AssemblyError):
    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Character set for {class_name} cannot be empty")


class EncodingError(GenerationError):
    """The generated characters do not form ASCII text."""


# --- csv conversion ---

class ConversionError(RcliError):
    """A csv file could not be converted."""

class HitObjectParseError(ValueError):
    """Base class for failures while decoding a ``[HitObjects]`` line.

    Subclasses ``ValueError`` so callers that already guard parsing with
    ``except ValueError`` keep working.
    """


class FormatError(HitObjectParseError):
    """A field that must be numeric could not be parsed."""


class UnsupportedTypeError(HitObjectParseError):
    """The type bitmask does not name any known hit object kind."""


class RangeError(HitObjectParseError):
    """A numeric field is outside the range the legacy format accepts."""


class MissingFieldError(HitObjectParseError):
    """The line has fewer fields than its hit object kind requires."""

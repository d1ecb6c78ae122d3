from .errors import (
    FormatError,
    HitObjectParseError,
    MissingFieldError,
    RangeError,
    UnsupportedTypeError,
)
from .factories import DefaultFactories, HitObjectFactories
from .hit_objects import Hit, HitObject, Hold, Slider, Spinner
from .parser import DecodedType, decode_type, parse_hit_object, parse_hit_objects
from .position import Position
from .samples import SampleBanks, SampleInfo
from .types import CurveType, HitObjectType, LegacySoundType, SampleBank

__version__ = "0.1.0"

__all__ = [
    "CurveType",
    "DecodedType",
    "DefaultFactories",
    "FormatError",
    "Hit",
    "HitObject",
    "HitObjectFactories",
    "HitObjectParseError",
    "HitObjectType",
    "Hold",
    "LegacySoundType",
    "MissingFieldError",
    "Position",
    "RangeError",
    "SampleBank",
    "SampleBanks",
    "SampleInfo",
    "Slider",
    "Spinner",
    "UnsupportedTypeError",
    "decode_type",
    "parse_hit_object",
    "parse_hit_objects",
]

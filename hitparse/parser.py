"""Decoding of single lines from the ``[HitObjects]`` section of a legacy
``.osu`` file.

A line looks like ``x,y,time,type,hitSound,objectParams...,hitSample``. The
meaning of everything after ``hitSound`` depends on the kind selected by the
``type`` bitmask, so decoding first resolves the kind and then hands the
remaining fields to a kind specific reader.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, NamedTuple, Sequence, Tuple

from .curve import parse_curve_path
from .errors import MissingFieldError, RangeError, UnsupportedTypeError
from .factories import HitObjectFactories
from .hit_objects import HitObject, Hold
from .position import PLAYFIELD_CENTER, Position
from .samples import SampleBanks, build_samples, parse_sample_banks
from .types import KIND_PRECEDENCE, HitObjectType, LegacySoundType
from .utils import get_field, parse_float, parse_int


logger = logging.getLogger(__name__)

# A sanity bound against corrupt data inherited from the legacy decoder. It is
# not a gameplay limit.
MAX_REPEAT_COUNT = 9000

# x, y, time, type, hitSound
MIN_FIELDS = 5

_SLIDER_MIN_FIELDS = 7
_SPINNER_MIN_FIELDS = 6

_SOUND_TYPE_MASK = int(
    LegacySoundType.Normal
    | LegacySoundType.Whistle
    | LegacySoundType.Finish
    | LegacySoundType.Clap
)


class DecodedType(NamedTuple):
    """The ``type`` field of a hit object line, split into its parts.

    Parameters
    ----------
    kind : HitObjectType
        Exactly one of ``Circle``, ``Slider``, ``Spinner`` or ``Hold``.
    new_combo : bool
        Whether the object starts a new combo.
    combo_skip : int
        How many combo colours to skip. The decoder itself ignores this.
    """

    kind: HitObjectType
    new_combo: bool
    combo_skip: int


def decode_type(type_code: int) -> DecodedType:
    """Resolve the kind and combo flags of a ``type`` bitmask.

    Parameters
    ----------
    type_code : int
        The raw ``type`` field.

    Returns
    -------
    decoded : DecodedType
        The decoded type. When several kind bits are set the first of
        circle, slider, spinner, hold wins.

    Raises
    ------
    UnsupportedTypeError
        Raised when no kind bit is set.
    """
    # 3 bit int for combo skip is held in the 4th, 5th and 6th bits
    combo_skip = (type_code & HitObjectType.ColourHax.value) >> 4
    remaining = type_code & ~HitObjectType.ColourHax.value

    new_combo = bool(remaining & HitObjectType.NewCombo.value)
    remaining &= ~HitObjectType.NewCombo.value

    for kind in KIND_PRECEDENCE:
        if remaining & kind.value:
            return DecodedType(kind, new_combo, combo_skip)

    raise UnsupportedTypeError(f"unknown type code {type_code!r}")


def _require_fields(fields: Sequence[str], count: int, kind: str) -> None:
    if len(fields) < count:
        raise MissingFieldError(
            f"{kind} lines need at least {count} fields, got {len(fields)}",
        )


def _read_position(fields: Sequence[str]) -> Position:
    x = parse_int("x", fields[0])
    y = parse_int("y", fields[1])
    return Position(float(x), float(y))


def _read_circle(
    fields: Sequence[str],
    new_combo: bool,
    factories: HitObjectFactories,
) -> Tuple[HitObject, SampleBanks]:
    hit_object = factories.create_hit(_read_position(fields), new_combo)
    return hit_object, parse_sample_banks(get_field(fields, 5, "hitSample", None))


def _read_slider(
    fields: Sequence[str],
    new_combo: bool,
    factories: HitObjectFactories,
) -> Tuple[HitObject, SampleBanks]:
    _require_fields(fields, _SLIDER_MIN_FIELDS, "slider")

    position = _read_position(fields)
    curve_type, control_points = parse_curve_path(fields[5], position)

    repeat_count = parse_int("repeat", fields[6])
    if not 0 <= repeat_count <= MAX_REPEAT_COUNT:
        raise RangeError(
            f"repeat should be between 0 and {MAX_REPEAT_COUNT},"
            f" got {repeat_count}",
        )

    length_raw = get_field(fields, 7, "length", None)
    length = 0.0 if length_raw is None else parse_float("length", length_raw)

    hit_object = factories.create_slider(
        position,
        new_combo,
        control_points,
        length,
        curve_type,
        repeat_count,
    )

    # fields 8 and 9 hold the edge sounds and edge sets, which are not read
    return hit_object, parse_sample_banks(get_field(fields, 10, "hitSample", None))


def _read_spinner(
    fields: Sequence[str],
    new_combo: bool,
    factories: HitObjectFactories,
) -> Tuple[HitObject, SampleBanks]:
    _require_fields(fields, _SPINNER_MIN_FIELDS, "spinner")

    # spinners ignore the x and y fields and the combo flag
    end_time = parse_float("end_time", fields[5])
    hit_object = factories.create_spinner(PLAYFIELD_CENTER, end_time)
    return hit_object, parse_sample_banks(get_field(fields, 6, "hitSample", None))


def _read_hold(
    fields: Sequence[str],
    new_combo: bool,
    factories: HitObjectFactories,
) -> Tuple[HitObject, SampleBanks]:
    # TODO: read the end time once a mania ruleset needs holds; it is packed
    # into the hitSample field as "endTime:normalSet:additionSet:..."
    logger.debug("hold objects are only partially decoded")
    return Hold(_read_position(fields), new_combo), SampleBanks()


_KindReader = Callable[
    [Sequence[str], bool, HitObjectFactories],
    Tuple[HitObject, SampleBanks],
]

_READERS: Dict[HitObjectType, _KindReader] = {
    HitObjectType.Circle: _read_circle,
    HitObjectType.Slider: _read_slider,
    HitObjectType.Spinner: _read_spinner,
    HitObjectType.Hold: _read_hold,
}


def parse_hit_object(line: str, factories: HitObjectFactories) -> HitObject:
    """Parse a hit object from a line in the ``[HitObjects]`` section.

    Parameters
    ----------
    line : str
        The line to parse, without the trailing newline.
    factories : HitObjectFactories
        The hooks used to build circles, sliders and spinners.

    Returns
    -------
    hit_object : HitObject
        The object built by ``factories`` (or a :class:`Hold`), with
        ``start_time`` and ``samples`` filled in.

    Raises
    ------
    MissingFieldError
        Raised when the line has too few fields for its kind.
    FormatError
        Raised when a numeric field is not numeric.
    UnsupportedTypeError
        Raised when the type bitmask names no known kind.
    RangeError
        Raised when a slider repeat count is out of range.
    """
    fields = line.split(",")
    _require_fields(fields, MIN_FIELDS, "hit object")

    decoded = decode_type(parse_int("type", fields[3]))
    hit_object, banks = _READERS[decoded.kind](fields, decoded.new_combo, factories)

    hit_object.start_time = parse_float("time", fields[2])

    sound_type = LegacySoundType(parse_int("hitSound", fields[4]) & _SOUND_TYPE_MASK)
    hit_object.samples.extend(build_samples(sound_type, banks))

    return hit_object


def parse_hit_objects(
    lines: Iterable[str],
    factories: HitObjectFactories,
    *,
    skip_exceptions: bool = False,
) -> Iterator[HitObject]:
    """Parse every non-blank line of a ``[HitObjects]`` section.

    Parameters
    ----------
    lines : iterable[str]
        The lines of the section.
    factories : HitObjectFactories
        The hooks used to build circles, sliders and spinners.
    skip_exceptions : bool, optional
        Log and skip lines which fail to parse instead of raising.

    Yields
    ------
    hit_object : HitObject
        The parsed hit objects, in line order.
    """
    for line in lines:
        line = line.strip()
        if not line:
            continue

        try:
            hit_object = parse_hit_object(line, factories)
        except ValueError:
            if skip_exceptions:
                logger.exception(f"Failed to parse hit object {line!r}")
                continue
            raise

        yield hit_object

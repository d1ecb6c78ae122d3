from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, unique


class HitObjectType(IntFlag):
    """The bits of the ``type`` field of a hit object line.

    Bits 0, 1, 3 and 7 select the kind. Bit 2 starts a new combo and bits
    4, 5 and 6 hold the number of combo colours to skip.
    """

    Circle = 1
    Slider = 2
    NewCombo = 4
    Spinner = 8
    ColourHax = 112
    Hold = 128


# order matters: the first kind whose bit is set wins
KIND_PRECEDENCE = (
    HitObjectType.Circle,
    HitObjectType.Slider,
    HitObjectType.Spinner,
    HitObjectType.Hold,
)


class LegacySoundType(IntFlag):
    """The bits of the ``hitSound`` field of a hit object line.

    ``Normal`` is always played whether or not its bit is set.
    """

    None_ = 0
    Normal = 1
    Whistle = 2
    Finish = 4
    Clap = 8


@unique
class CurveType(Enum):
    """The interpolation used between slider control points.

    The value of each member is the token that selects it in a curve path.
    """

    Catmull = "C"
    Bezier = "B"
    Linear = "L"
    PerfectCurve = "P"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "CurveType | None":
        """Look up the curve type for a single character token.

        Parameters
        ----------
        token : str
            The token from the curve path.

        Returns
        -------
        curve_type : CurveType or None
            The matching curve type, or ``None`` when the token is unknown.
        """
        try:
            return cls(token)
        except ValueError:
            return None


@unique
class SampleBank(IntEnum):
    None_ = 0
    Normal = 1
    Soft = 2
    Drum = 3

    @classmethod
    def bank_name(cls, value: int) -> str | None:
        """The lower-case bank name for a numeric bank value.

        ``none`` is reported as ``None``. Values outside the enum are kept as
        their decimal text, matching how the legacy decoder stringified them.
        """
        try:
            name = cls(value).name.rstrip("_").lower()
        except ValueError:
            return str(value)

        if name == "none":
            return None
        return name

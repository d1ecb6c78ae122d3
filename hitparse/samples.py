from __future__ import annotations

from typing import List, NamedTuple

from .errors import MissingFieldError
from .types import LegacySoundType, SampleBank
from .utils import parse_int


HIT_NORMAL = "hitnormal"
HIT_WHISTLE = "hitwhistle"
HIT_FINISH = "hitfinish"
HIT_CLAP = "hitclap"

# addition samples are emitted in this order, after the normal sample
_ADDITIONS = (
    (LegacySoundType.Finish, HIT_FINISH),
    (LegacySoundType.Whistle, HIT_WHISTLE),
    (LegacySoundType.Clap, HIT_CLAP),
)


class SampleInfo(NamedTuple):
    """A sample to play when a hit object is hit.

    Parameters
    ----------
    bank : str or None
        The lower-case sample bank name, or ``None`` to use the bank of the
        active timing point.
    name : str
        One of ``hitnormal``, ``hitwhistle``, ``hitfinish`` or ``hitclap``.
    volume : int
        The sample volume. ``0`` means the volume of the active timing point.
    """

    bank: str | None
    name: str
    volume: int = 0


class SampleBanks(NamedTuple):
    """The banks and volume read from a ``hitSample`` field."""

    normal_bank: str | None = None
    addition_bank: str | None = None
    volume: int = 0


def parse_sample_banks(data: str | None) -> SampleBanks:
    """Parse the ``hitSample`` field of a hit object line.

    Parameters
    ----------
    data : str or None
        The field, ``normalSet:additionSet[:index][:volume][:filename]``.

    Returns
    -------
    banks : SampleBanks
        The decoded banks and volume. An empty or missing field gives the
        defaults.

    Raises
    ------
    MissingFieldError
        Raised when the field does not hold both bank values.
    FormatError
        Raised when a bank or the volume is not an int.

    Notes
    -----
    The custom sample index and filename are accepted but not kept.
    """
    if not data:
        return SampleBanks()

    parts = data.split(":")
    if len(parts) < 2:
        raise MissingFieldError(
            f"expected hitSample in the form normalSet:additionSet, got {data!r}",
        )

    normal_bank = SampleBank.bank_name(parse_int("normalSet", parts[0]))
    addition_bank = SampleBank.bank_name(parse_int("additionSet", parts[1]))

    volume = 0
    if len(parts) > 3 and parts[3]:
        volume = parse_int("volume", parts[3])

    return SampleBanks(normal_bank, addition_bank, volume)


def pack_sample_banks(banks: SampleBanks) -> str:
    """The ``hitSample`` field for ``banks`` with no custom index or filename."""

    def bank_value(name: str | None) -> int:
        if name is None:
            return SampleBank.None_
        try:
            # banks outside the enum were kept as their decimal text
            return int(name)
        except ValueError:
            return SampleBank[name.capitalize()]

    return ":".join(
        [
            str(int(bank_value(banks.normal_bank))),
            str(int(bank_value(banks.addition_bank))),
            "0",
            str(banks.volume),
            "",
        ]
    )


def build_samples(sound_type: LegacySoundType, banks: SampleBanks) -> List[SampleInfo]:
    """Build the samples for a hit object.

    The normal sample always comes first and uses the normal bank. Each
    addition present in ``sound_type`` follows in finish, whistle, clap order
    and uses the addition bank.
    """
    samples = [SampleInfo(banks.normal_bank, HIT_NORMAL, banks.volume)]
    for flag, name in _ADDITIONS:
        if sound_type & flag:
            samples.append(SampleInfo(banks.addition_bank, name, banks.volume))
    return samples

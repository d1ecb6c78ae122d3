from __future__ import annotations

from typing import ClassVar, List, Sequence

import numpy as np
import numpy.typing as npt

from .position import PLAYFIELD_CENTER, Position, positions_to_array
from .samples import SampleInfo
from .types import CurveType
from .utils import lazyval


class HitObject:
    """An abstract hit element decoded from a legacy ``[HitObjects]`` line.

    Parameters
    ----------
    position : Position
        Where this element appears on the screen.
    new_combo : bool
        Whether this element is the start of a new combo.
    start_time : float
        When this element appears in the map, in milliseconds.
    samples : list[SampleInfo], optional
        The samples to play when this element is hit.
    """

    compared_attributes: ClassVar[Sequence[str]] = (
        "position",
        "new_combo",
        "start_time",
        "samples",
    )

    def __init__(
        self,
        position: Position,
        new_combo: bool = False,
        start_time: float = 0.0,
        samples: Sequence[SampleInfo] = (),
    ) -> None:
        self.position = position
        self.new_combo = new_combo
        self.start_time = start_time
        self.samples: List[SampleInfo] = list(samples)

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}: {self.position}, {self.start_time:g}ms>"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name)
            for name in self.compared_attributes
        )

    __hash__ = None  # type: ignore[assignment]


class Hit(HitObject):
    """A circle hit element."""


class Slider(HitObject):
    """A slider hit element.

    Parameters
    ----------
    position : Position
        Where this slider appears on the screen.
    new_combo : bool
        Whether this slider is the start of a new combo.
    control_points : list[Position]
        The points of the curve path. The first point is ``position``.
    length : float
        The length of this slider in osu! pixels, ``0`` when the line did not
        give one.
    curve_type : CurveType
        How the curve is interpolated between control points.
    repeat_count : int
        The number of times the slider is traversed.
    """

    compared_attributes = HitObject.compared_attributes + (
        "control_points",
        "length",
        "curve_type",
        "repeat_count",
    )

    def __init__(
        self,
        position: Position,
        new_combo: bool,
        control_points: Sequence[Position],
        length: float,
        curve_type: CurveType,
        repeat_count: int,
        start_time: float = 0.0,
        samples: Sequence[SampleInfo] = (),
    ) -> None:
        super().__init__(position, new_combo, start_time, samples)
        self.control_points: List[Position] = list(control_points)
        self.length = length
        self.curve_type = curve_type
        self.repeat_count = repeat_count

    @lazyval
    def control_point_array(self) -> npt.NDArray[np.float64]:
        """The control points as an ``(n, 2)`` array."""
        return positions_to_array(self.control_points)


class Spinner(HitObject):
    """A spinner hit element.

    Spinners always sit at the centre of the playfield and never start a new
    combo.
    """

    compared_attributes = HitObject.compared_attributes + ("end_time",)

    def __init__(
        self,
        end_time: float,
        position: Position = PLAYFIELD_CENTER,
        start_time: float = 0.0,
        samples: Sequence[SampleInfo] = (),
    ) -> None:
        super().__init__(position, False, start_time, samples)
        self.end_time = end_time


class Hold(HitObject):
    """A hold hit element, produced by BMS conversions.

    Notes
    -----
    Only the position and the combo flag are decoded. The end time of a hold
    is not read from the line, so consumers must treat this object as
    incomplete.
    """

    is_partial: ClassVar[bool] = True

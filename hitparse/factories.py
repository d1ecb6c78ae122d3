from __future__ import annotations

from typing import List, Protocol

from .hit_objects import Hit, HitObject, Slider, Spinner
from .position import Position
from .types import CurveType


class HitObjectFactories(Protocol):
    """The hooks a ruleset provides to build its own hit objects.

    The decoder calls exactly one of these per line and then fills in
    ``start_time`` and ``samples`` on the returned object.
    """

    def create_hit(self, position: Position, new_combo: bool) -> HitObject:
        ...

    def create_slider(
        self,
        position: Position,
        new_combo: bool,
        control_points: List[Position],
        length: float,
        curve_type: CurveType,
        repeat_count: int,
    ) -> HitObject:
        ...

    def create_spinner(self, position: Position, end_time: float) -> HitObject:
        ...


class DefaultFactories:
    """Factories that build the plain :class:`Hit`, :class:`Slider` and
    :class:`Spinner` records.
    """

    def create_hit(self, position: Position, new_combo: bool) -> HitObject:
        return Hit(position, new_combo)

    def create_slider(
        self,
        position: Position,
        new_combo: bool,
        control_points: List[Position],
        length: float,
        curve_type: CurveType,
        repeat_count: int,
    ) -> HitObject:
        return Slider(
            position,
            new_combo,
            control_points,
            length,
            curve_type,
            repeat_count,
        )

    def create_spinner(self, position: Position, end_time: float) -> HitObject:
        return Spinner(end_time, position)

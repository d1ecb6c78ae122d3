from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .errors import FormatError
from .position import Position
from .types import CurveType
from .utils import pack_float, parse_float


logger = logging.getLogger(__name__)


def _truncate(name: str, raw: str) -> int:
    value = parse_float(name, raw)
    try:
        return int(value)
    except (OverflowError, ValueError) as e:
        raise FormatError(f"{name} should be a finite number, got {raw!r}") from e


def parse_curve_path(
    data: str,
    position: Position,
) -> Tuple[CurveType, List[Position]]:
    """Parse the curve path field of a slider line.

    Parameters
    ----------
    data : str
        The field, e.g. ``"B|100:100|200:200"``.
    position : Position
        The slider's own position, which becomes the first control point.

    Returns
    -------
    curve_type : CurveType
        The last recognised curve type token, or ``Catmull`` if there is
        none.
    control_points : list[Position]
        ``position`` followed by each ``x:y`` token in order. Coordinates
        are truncated toward zero.

    Raises
    ------
    FormatError
        Raised when a point token is not of the form ``x:y`` with numeric
        sides.
    """
    curve_type = CurveType.Catmull
    points = [position]

    for token in data.split("|"):
        if len(token) == 1:
            selected = CurveType.from_token(token)
            if selected is None:
                logger.debug("ignoring unknown curve type token %r", token)
            else:
                curve_type = selected
            continue

        coordinates = token.split(":")
        if len(coordinates) < 2:
            raise FormatError(f"expected points in the form x:y, got {token!r}")

        # anything past the second coordinate is ignored
        x = _truncate("x", coordinates[0])
        y = _truncate("y", coordinates[1])
        points.append(Position(float(x), float(y)))

    return curve_type, points


def pack_curve_path(curve_type: CurveType, control_points: Sequence[Position]) -> str:
    """The curve path field for a slider, without its leading position.

    Parameters
    ----------
    curve_type : CurveType
        The slider's curve type.
    control_points : list[Position]
        All control points, including the slider's own position first.

    Returns
    -------
    packed_str : str
        The packed curve path.
    """
    return "|".join(
        [curve_type.token]
        + [f"{pack_float(p.x)}:{pack_float(p.y)}" for p in control_points[1:]]
    )

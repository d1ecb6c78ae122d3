from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np
import numpy.typing as npt


class Position(NamedTuple):
    """A position on the osu! screen.

    Parameters
    ----------
    x : float
        The x coordinate.
    y : float
        The y coordinate.

    Notes
    -----
    The visible region of the osu! standard playfield is [0, 512] by [0, 384].
    Positions may fall outside of this range for slider curve control points.
    """

    x: float
    y: float


PLAYFIELD_WIDTH = 512
PLAYFIELD_HEIGHT = 384
PLAYFIELD_CENTER = Position(PLAYFIELD_WIDTH / 2, PLAYFIELD_HEIGHT / 2)


def positions_to_array(points: Sequence[Position]) -> npt.NDArray[np.float64]:
    """Stack positions into an ``(n, 2)`` array of ``float64``."""
    return np.array(points, dtype=np.float64).reshape((-1, 2))

# layout.py
# Flattened tree geometry: how many nodes, how many rows, where each row starts.
#
# Row 0 holds the leaves at [0, leafs). Each following row holds
# previous_width / arity nodes, contiguous in index space. The root is
# the single node of the last row, at index len - 1.

import logging

from pydantic import BaseModel, ConfigDict

from nary_merkle.errors import IndexOutOfRange, InvalidLayout

logger = logging.getLogger(__name__)


class Layout(BaseModel):
    """Geometry of a tree with `leafs` leaves and fixed `arity`."""

    model_config = ConfigDict(frozen=True)

    leafs: int
    arity: int
    len: int
    row_count: int
    row_starts: tuple[int, ...]
    row_widths: tuple[int, ...]

    def row_of(self, index: int) -> int:
        """Row number holding node `index`. Raises IndexOutOfRange outside [0, len)."""
        if index < 0:
            raise IndexOutOfRange(index, self.len)
        for row, start in enumerate(self.row_starts):
            if index < start + self.row_widths[row]:
                return row
        raise IndexOutOfRange(index, self.len)


def compute_layout(leafs: int, arity: int) -> Layout:
    """
    Validate (leafs, arity) and compute the flattened layout.

    Raises InvalidLayout unless every row divides exactly by `arity`
    all the way down to a single root.
    """
    if arity < 2 or leafs < 1:
        raise InvalidLayout(leafs, arity)

    starts: list[int] = []
    widths: list[int] = []
    start = 0
    width = leafs
    while True:
        starts.append(start)
        widths.append(width)
        if width == 1:
            break
        if width % arity != 0:
            raise InvalidLayout(leafs, arity, row=len(widths) - 1, remainder=width % arity)
        start += width
        width //= arity

    layout = Layout(
        leafs=leafs,
        arity=arity,
        len=start + 1,
        row_count=len(widths),
        row_starts=tuple(starts),
        row_widths=tuple(widths),
    )
    logger.debug("Layout leafs=%d arity=%d -> len=%d rows=%d", leafs, arity, layout.len, layout.row_count)
    return layout

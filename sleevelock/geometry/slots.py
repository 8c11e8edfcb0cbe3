"""Centre lines of slot profiles, without any geometry kernel."""
import math
from dataclasses import dataclass

# Notch segment of the L-shaped lock only exists above this right factor.
NOTCH_THRESHOLD = 1.2


@dataclass(frozen=True)
class Segment:
    """Straight piece of a slot centre line in the XY plane."""

    start: tuple[float, float]
    end: tuple[float, float]

    @property
    def length(self):
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def angle(self):
        """Direction from start to end [rad], counter-clockwise from +X."""
        return math.atan2(self.end[1] - self.start[1], self.end[0] - self.start[0])


@dataclass(frozen=True)
class SlotLayout:
    channel: Segment
    lock: tuple[Segment, ...]
    angle: float | None  # diagonal deflection [rad], None for the L policy
    left: Segment  # sideways extension towards -X

    @property
    def segments(self):
        return tuple(s for s in (self.channel, *self.lock, self.left) if s.length > 0)


def slot_layout(width, length, diagonal=True, right=1.0, back=1.0, left=0.0) -> SlotLayout:
    """Centre lines of a slot: channel (0, 0) -> (0, length), lock at the far end.

    The lock moves `right` slot widths towards +X and `back` slot widths
    towards -Y, either in one diagonal stroke of width * hypot(right, back)
    at atan(back / right), or L-shaped: sideways first, then a notch back
    only when right > NOTCH_THRESHOLD. With either policy, `left` adds a
    straight extension of `left` slot widths towards -X at the far end.
    """
    channel = Segment((0.0, 0.0), (0.0, float(length)))
    x0, y0 = channel.end
    side_left = Segment(channel.end, (x0 - width * left, y0))
    if diagonal:
        angle = math.atan2(back, right)
        reach = width * math.hypot(right, back)
        end = (x0 + reach * math.cos(angle), y0 - reach * math.sin(angle))
        return SlotLayout(channel, (Segment(channel.end, end),), angle, side_left)
    side = Segment(channel.end, (x0 + width * right, y0))
    lock = (side,)
    if right > NOTCH_THRESHOLD:
        lock += (Segment(side.end, (side.end[0], side.end[1] - width * back)),)
    return SlotLayout(channel, lock, None, side_left)

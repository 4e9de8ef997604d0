# core/display.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence

from lrcplayer.core.gaps import Gap, gap_at
from lrcplayer.core.lrc import LyricLine, active_index, is_synchronized


class DisplayState(Enum):
    LOADING = auto()
    EMPTY = auto()
    UNSYNCHRONIZED = auto()
    BEFORE_FIRST_LYRIC = auto()
    LYRIC_ACTIVE = auto()
    IN_GAP = auto()


@dataclass(frozen=True)
class DisplayThresholds:
    min_display_s: float = 3.0   # active line shown at least this long before dots
    lead_in_s: float = 0.5       # dots hidden this close to a lyric timestamp


@dataclass(frozen=True)
class DisplaySelection:
    state: DisplayState
    past: Optional[LyricLine] = None
    current: Optional[LyricLine] = None
    next: Optional[LyricLine] = None
    gap: Optional[Gap] = None

    @property
    def is_placeholder(self) -> bool:
        return self.state in (DisplayState.LOADING, DisplayState.EMPTY)


LOADING = DisplaySelection(DisplayState.LOADING)
EMPTY = DisplaySelection(DisplayState.EMPTY)

DEFAULT_THRESHOLDS = DisplayThresholds()


def _near_timestamp(lines: Sequence[LyricLine], t: float, window: float) -> bool:
    return any(line.time > 0 and abs(t - line.time) < window for line in lines)


def _suppressing_gap(
    gaps: Sequence[Gap],
    current: LyricLine,
    nxt: LyricLine,
    t: float,
    thresholds: DisplayThresholds,
) -> Optional[Gap]:
    if t - current.time < thresholds.min_display_s:
        return None
    if nxt.time - t < thresholds.lead_in_s:
        return None
    for gap in gaps:
        if gap.start == current.time and gap.end == nxt.time and gap.contains(t):
            return gap
    return None


def select_display(
    lines: Sequence[LyricLine],
    gaps: Sequence[Gap],
    current_time: float,
    thresholds: DisplayThresholds = DEFAULT_THRESHOLDS,
) -> DisplaySelection:
    """
    Decide which lines to render at `current_time`.

    Pure function of its inputs, safe to call on every clock tick.
    """
    if not lines:
        return EMPTY

    if not is_synchronized(lines):
        return DisplaySelection(
            DisplayState.UNSYNCHRONIZED,
            current=lines[0],
            next=lines[1] if len(lines) > 1 else None,
        )

    idx = active_index(lines, current_time)

    if idx < 0:
        gap = gap_at(gaps, current_time)
        if gap is not None and not _near_timestamp(lines, current_time, thresholds.lead_in_s):
            return DisplaySelection(DisplayState.IN_GAP, next=lines[0], gap=gap)
        return DisplaySelection(DisplayState.BEFORE_FIRST_LYRIC, next=lines[0])

    current = lines[idx]
    past = lines[idx - 1] if idx > 0 else None
    nxt = lines[idx + 1] if idx + 1 < len(lines) else None

    if nxt is not None:
        gap = _suppressing_gap(gaps, current, nxt, current_time, thresholds)
        if gap is not None:
            # dots replace the active line; the window itself does not move
            return DisplaySelection(DisplayState.LYRIC_ACTIVE, past=past, next=nxt, gap=gap)

    return DisplaySelection(DisplayState.LYRIC_ACTIVE, past=past, current=current, next=nxt)

# core/gaps.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from lrcplayer.core.lrc import LyricLine

GAP_THRESHOLD_S = 5.0


@dataclass(frozen=True)
class Gap:
    start: float
    end: float

    def contains(self, t: float) -> bool:
        return self.start <= t < self.end


def detect_gaps(
    lines: Sequence[LyricLine],
    duration: Optional[float],
    threshold: float = GAP_THRESHOLD_S,
) -> List[Gap]:
    """
    Silences of at least `threshold` seconds around synchronized lines.

    Only lines with time > 0 count. A gap runs from one lyric's timestamp
    to the next one's; the leading gap starts at 0 and the trailing gap
    ends at `duration` (skipped while the duration is unknown).
    """
    synced = sorted((line for line in lines if line.time > 0), key=lambda line: line.time)
    if not synced:
        return []

    gaps: List[Gap] = []

    first = synced[0].time
    if first >= threshold:
        gaps.append(Gap(0.0, first))

    for prev, nxt in zip(synced, synced[1:]):
        if nxt.time - prev.time >= threshold:
            gaps.append(Gap(prev.time, nxt.time))

    last = synced[-1].time
    if duration and duration > 0 and duration - last >= threshold:
        gaps.append(Gap(last, float(duration)))

    return gaps


def gap_at(gaps: Sequence[Gap], t: float) -> Optional[Gap]:
    for gap in gaps:
        if gap.contains(t):
            return gap
    return None

# core/lrc.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence

_TS_RE = re.compile(r"\[([0-9]{1,2}):([0-9]{2})(?:\.([0-9]{1,3}))?\]")


@dataclass(frozen=True)
class LyricLine:
    time: float     # seconds from track start
    text: str


def _ts_to_seconds(mm: str, ss: str, frac: str | None) -> float:
    ms = int(frac.ljust(3, "0")) if frac else 0
    return int(mm) * 60 + int(ss) + ms / 1000


def _seconds_to_ts(seconds: float) -> str:
    """Format seconds as mm:ss.xx (centiseconds)."""
    cs_total = int(round(max(0.0, seconds) * 100))
    m = cs_total // 6000
    s = (cs_total // 100) % 60
    cs = cs_total % 100
    return f"{m:02d}:{s:02d}.{cs:02d}"


def parse_lrc(lrc_text: str | None) -> List[LyricLine]:
    """
    Returns lyric lines sorted by time.

    Text with no timestamp tag at all is treated as plain lyrics: every
    non-blank line becomes a line at time 0, in file order.
    Otherwise untagged lines (metadata like [ar:], [ti:]) are dropped and a
    line carrying several tags is emitted once per tag.
    """
    out: List[LyricLine] = []
    if not lrc_text or not isinstance(lrc_text, str):
        return out

    if not _TS_RE.search(lrc_text):
        for raw_line in lrc_text.split("\n"):
            line = raw_line.strip()
            if line:
                out.append(LyricLine(0.0, line))
        return out

    for raw_line in lrc_text.split("\n"):
        matches = list(_TS_RE.finditer(raw_line))
        if not matches:
            continue

        text = _TS_RE.sub("", raw_line).strip()
        if not text:
            continue

        for m in matches:
            out.append(LyricLine(_ts_to_seconds(m.group(1), m.group(2), m.group(3)), text))

    # list.sort is stable: equal timestamps keep file order
    out.sort(key=lambda line: line.time)
    return out


def format_lrc(lines: Iterable[LyricLine]) -> str:
    """Build LRC text from lines, one `[mm:ss.xx] text` row per line."""
    return "\n".join(f"[{_seconds_to_ts(line.time)}] {line.text}" for line in lines)


def is_synchronized(lines: Sequence[LyricLine]) -> bool:
    return any(line.time > 0 for line in lines)


def active_index(lines: Sequence[LyricLine], current_time: float) -> int:
    """
    Index of the last line whose time is <= current_time, or -1.

    A line stays active until the next one starts; it has no duration of
    its own.
    """
    for i in range(len(lines) - 1, -1, -1):
        if current_time >= lines[i].time:
            return i
    return -1

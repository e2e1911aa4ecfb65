"""Process Uptime — monotonic elapsed time since import, formatted for humans.

Invariants:
    - Uptime is measured with time.monotonic(): never decreases, immune to
      wall-clock adjustments
    - format_duration is pure: same seconds in, same string out
"""

import time

_PROCESS_START = time.monotonic()


def uptime_seconds(since: float | None = None) -> float:
    """Seconds elapsed since process start (or since the given monotonic mark)."""
    start = _PROCESS_START if since is None else since
    return max(0.0, time.monotonic() - start)


def format_duration(seconds: float) -> str:
    """Render seconds as e.g. '1h2m3.5s', '4m0s', '12.25s' or '350ms'."""
    if seconds <= 0:
        return "0s"
    if seconds < 1:
        millis = round(seconds * 1000, 3)
        return f"{_trim(millis)}ms"

    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    out = ""
    if hours:
        out += f"{int(hours)}h"
    if hours or minutes:
        out += f"{int(minutes)}m"
    return out + f"{_trim(round(secs, 3))}s"


def _trim(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"

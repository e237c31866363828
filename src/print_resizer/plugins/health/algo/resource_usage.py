"""Process memory readings for the health report."""

import os
import resource
import sys
from pathlib import Path

from PIL import Image

STATM = Path("/proc/self/statm")


def current_rss_bytes() -> int | None:
    """Resident set size right now, or None where /proc is unavailable."""
    try:
        fields = STATM.read_text().split()
    except OSError:
        return None
    return int(fields[1]) * os.sysconf("SC_PAGE_SIZE")


def peak_rss_bytes() -> int:
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS, kilobytes elsewhere
    if sys.platform == "darwin":
        return peak
    return peak * 1024


def image_block_stats() -> dict[str, int]:
    """Pillow's image memory arena counters (allocated and cached blocks)."""
    stats = Image.core.get_stats()
    return {key: int(value) for key, value in stats.items()}


def memory_usage() -> dict[str, object]:
    return {
        "rss_bytes": current_rss_bytes(),
        "peak_rss_bytes": peak_rss_bytes(),
        "image_blocks": image_block_stats(),
    }

"""Query the memory used by the current process."""

from __future__ import annotations

import os
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None  # type: ignore[assignment]

_STATM_PATH = "/proc/self/statm"


def max_size() -> int:
    """Peak resident set size in bytes, or 0 where it cannot be determined."""
    platform = sys.platform
    is_linux = platform.startswith("linux")
    is_mac = platform == "darwin"
    if resource is None or not (is_linux or is_mac):
        return 0
    maxrss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    return int(maxrss) if is_mac else int(maxrss) * 1024


def current_size() -> int:
    """Current resident set size in bytes, or 0 where it cannot be determined."""
    if not sys.platform.startswith("linux"):
        return 0
    try:
        with open(_STATM_PATH) as fp:
            fields = fp.read().split()
    except OSError:
        print("Failed to read process information file", file=sys.stderr)
        return 0
    try:
        rss = int(fields[1])
    except (IndexError, ValueError):
        print("Failed to retrieve RSS information", file=sys.stderr)
        return 0
    return rss * int(os.sysconf("SC_PAGE_SIZE"))
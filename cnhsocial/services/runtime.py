# cnhsocial/services/runtime.py
import platform
import resource
import sys
import time
from typing import Any, Dict

_started_at = time.monotonic()


def uptime_seconds() -> float:
    """Segundos desde que o processo carregou o serviço."""
    return round(time.monotonic() - _started_at, 3)


def memory_usage() -> Dict[str, Any]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # pico de RSS (ru_maxrss), não o uso atual; vem em KB no Linux e em bytes no macOS
    peak_rss = usage.ru_maxrss if sys.platform == "darwin" else usage.ru_maxrss * 1024
    return {
        "peak_rss_bytes": peak_rss,
        "allocated_blocks": sys.getallocatedblocks(),
    }


def runtime_info() -> Dict[str, str]:
    return {
        "runtime": sys.platform,
        "python_version": platform.python_version(),
    }

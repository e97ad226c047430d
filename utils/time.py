import time


def now_ms() -> int:
    """Returns the current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)

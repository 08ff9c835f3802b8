"""Wall-clock implementation of the ``Clock`` capability."""

from __future__ import annotations

import time


class SystemClock:
    """Blocks the current thread with ``time.sleep``."""

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


__all__ = ["SystemClock"]

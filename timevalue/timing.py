from __future__ import annotations

from enum import IntEnum


class PaymentTiming(IntEnum):
    """
    When payments are due within each period.

    The integer value is the adjustment applied inside the rate term,
    i.e. (1 + rate * timing).
    """

    BEGIN = 1
    END = 0
    START = 1


_TIMING_NAMES = {
    "begin": PaymentTiming.BEGIN,
    "start": PaymentTiming.BEGIN,
    "end": PaymentTiming.END,
}


def as_timing(timing: PaymentTiming | str | int) -> PaymentTiming:
    if isinstance(timing, PaymentTiming):
        return timing
    if isinstance(timing, str):
        key = timing.strip().lower()
        if key not in _TIMING_NAMES:
            raise ValueError("timing must be 'begin', 'start' or 'end'.")
        return _TIMING_NAMES[key]
    if timing in (0, 1):
        return PaymentTiming(int(timing))
    raise ValueError("timing must be a PaymentTiming, 0 or 1.")

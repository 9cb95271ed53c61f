from __future__ import annotations

import numpy as np
import pandas as pd

from timevalue.annuity import total_payment
from timevalue.timing import PaymentTiming, as_timing

SCHEDULE_COLUMNS = ["period", "payment", "interest", "principal", "balance"]


def _validate_periods(periods) -> int:
    if isinstance(periods, bool) or not np.isfinite(periods) or int(periods) != periods:
        raise ValueError("periods must be an integer.")
    periods = int(periods)
    if periods < 1:
        raise ValueError("periods must be >= 1.")
    return periods


def amortization_schedule(
    rate: float,
    periods: int,
    present_value: float,
    future_value: float = 0.0,
    timing: PaymentTiming | str = PaymentTiming.END,
) -> pd.DataFrame:
    """
    Per-period split of a level payment into interest and principal.

    Parameters
    ----------
    rate:
        Interest rate per period.
    periods:
        Number of payment periods (positive integer).
    present_value:
        Opening balance, e.g. the loan principal.
    future_value:
        Balance left after the last payment.
    timing:
        Whether payments are due at the beginning or end of each period.

    Returns
    -------
    pd.DataFrame
        One row per period with columns period, payment, interest, principal
        and balance. Interest is signed like the payment (a cost to the
        borrower is negative), and principal = payment - interest. The last
        balance equals -future_value up to rounding.
    """
    periods = _validate_periods(periods)
    rate = float(rate)
    when = as_timing(timing)
    payment = total_payment(rate, periods, present_value, future_value, when)

    interest = np.empty(periods, dtype=float)
    principal = np.empty(periods, dtype=float)
    balance = np.empty(periods, dtype=float)

    prev = float(present_value)
    for t in range(periods):
        accruing = prev + payment if when == PaymentTiming.BEGIN else prev
        interest[t] = -accruing * rate
        principal[t] = payment - interest[t]
        prev = prev + principal[t]
        balance[t] = prev

    return pd.DataFrame(
        {
            "period": np.arange(1, periods + 1),
            "payment": np.full(periods, payment),
            "interest": interest,
            "principal": principal,
            "balance": balance,
        },
        columns=SCHEDULE_COLUMNS,
    )

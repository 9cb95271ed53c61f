from __future__ import annotations

import numpy as np

from timevalue.annuity import _validate_cash_flows, net_present_value


def modified_internal_rate_of_return(cash_flows, finance_rate: float, reinvest_rate: float) -> float:
    """
    Modified internal rate of return with separate finance and reinvestment rates.

    Inflows are discounted at reinvest_rate and outflows at finance_rate. The
    first value is a sunk cost at time zero. A zero outflow total or a negative
    base under a fractional exponent yields inf/NaN rather than raising.
    """
    cash_flows = _validate_cash_flows(cash_flows, min_size=2)

    n = cash_flows.size
    positive = np.where(cash_flows < 0.0, 0.0, cash_flows)
    negative = np.where(cash_flows > 0.0, 0.0, cash_flows)

    numerator = np.float64(net_present_value(reinvest_rate, positive))
    denominator = np.float64(net_present_value(finance_rate, negative))

    with np.errstate(all="ignore"):
        ratio = numerator / denominator
        return float(np.power(ratio, 1.0 / (n - 1)) * (1.0 + reinvest_rate) - 1.0)

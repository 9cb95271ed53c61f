from __future__ import annotations

import numpy as np

from timevalue.timing import PaymentTiming, as_timing


def _validate_cash_flows(cash_flows, min_size: int = 0) -> np.ndarray:
    cash_flows = np.asarray(cash_flows, dtype=float)
    if cash_flows.ndim != 1:
        raise ValueError("cash_flows must be a 1D array.")
    if cash_flows.size < min_size:
        raise ValueError(f"cash_flows must have at least {min_size} values.")
    return cash_flows


def total_payment(
    rate: float,
    periods: float,
    present_value: float,
    future_value: float = 0.0,
    timing: PaymentTiming | str = PaymentTiming.END,
) -> float:
    """
    Payment against principal plus interest made in each period.

    Besides the usual loan payment, this also gives the periodic deposit needed
    to reach future_value from an initial present_value.

    Parameters
    ----------
    rate:
        Interest rate per period.
    periods:
        Number of payment periods. Not guarded against zero.
    present_value:
        Present value (e.g. loan principal).
    future_value:
        Balance left after the last payment.
    timing:
        Whether payments are due at the beginning or end of each period.

    Returns
    -------
    float
        Payment per period, signed opposite to present_value.
    """
    rate = np.float64(rate)
    periods = np.float64(periods)
    when = as_timing(timing)

    with np.errstate(all="ignore"):
        growth = (1.0 + rate) ** periods
        if rate == 0.0:
            fact = periods
        else:
            fact = (1.0 + rate * when) * (growth - 1.0) / rate
        return float(-(future_value + present_value * growth) / fact)


def future_value(
    rate: float,
    periods: float,
    payment: float,
    present_value: float = 0.0,
    timing: PaymentTiming | str = PaymentTiming.END,
) -> float:
    """
    Value of an investment at the end of the payment periods.
    """
    rate = np.float64(rate)
    periods = np.float64(periods)
    when = as_timing(timing)

    if rate == 0.0:
        return float(-(present_value + payment * periods))

    with np.errstate(all="ignore"):
        growth = (1.0 + rate) ** periods
        return float(
            -present_value * growth - payment * (1.0 + rate * when) / rate * (growth - 1.0)
        )


def present_value(
    rate: float,
    periods: float,
    payment: float,
    future_value: float = 0.0,
    timing: PaymentTiming | str = PaymentTiming.END,
) -> float:
    """
    Present value of a series of payments plus a terminal balance.

    Parameters
    ----------
    rate:
        Interest rate per period.
    periods:
        Number of payment periods.
    payment:
        Payment made in each period.
    future_value:
        Balance after the last payment.
    timing:
        Whether payments are due at the beginning or end of each period.
    """
    rate = np.float64(rate)
    periods = np.float64(periods)
    when = as_timing(timing)

    with np.errstate(all="ignore"):
        growth = (1.0 + rate) ** periods
        if rate == 0.0:
            fact = periods
        else:
            fact = (1.0 + rate * when) * (growth - 1.0) / rate
        return float(-(future_value + payment * fact) / growth)


def number_of_periodic_payments(
    rate: float,
    payment: float,
    present_value: float,
    future_value: float = 0.0,
    timing: PaymentTiming | str = PaymentTiming.END,
) -> float:
    """
    Number of periodic payments needed to move present_value to future_value.

    Returns +inf when the balance never changes and NaN when the log argument
    is negative; neither case raises.
    """
    rate = np.float64(rate)
    payment = np.float64(payment)
    when = as_timing(timing)

    with np.errstate(all="ignore"):
        if rate == 0.0:
            return float(-(future_value + present_value) / payment)
        z = payment * (1.0 + rate * when) / rate
        return float(np.log((-future_value + z) / (present_value + z)) / np.log(1.0 + rate))


def net_present_value(rate: float, cash_flows, initial_investment: float = 0.0) -> float:
    """
    Net present value of a cash flow series with fixed periods.

    cash_flows[i] is discounted by (1 + rate) ** i, so the first entry is
    taken at time zero. initial_investment is added undiscounted.
    """
    cash_flows = _validate_cash_flows(cash_flows)
    rate = np.float64(rate)
    with np.errstate(all="ignore"):
        discount_factors = np.power(1.0 + rate, np.arange(cash_flows.size))
        return float(initial_investment + np.sum(cash_flows / discount_factors))


def npv_curve(rates, cash_flows, initial_investment: float = 0.0) -> np.ndarray:
    """
    Net present values across a grid of discount rates.

    Returns an array with the same shape as rates.
    """
    cash_flows = _validate_cash_flows(cash_flows)
    rates = np.asarray(rates, dtype=float)
    exponents = -np.arange(cash_flows.size, dtype=float)
    with np.errstate(all="ignore"):
        discounted = cash_flows * (1.0 + rates)[..., None] ** exponents
        return initial_investment + discounted.sum(axis=-1)

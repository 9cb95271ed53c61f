from __future__ import annotations

import logging

import numpy as np

from timevalue.annuity import _validate_cash_flows

MAX_ITERATIONS = 20
ABSOLUTE_ACCURACY = 1e-7
DEFAULT_GUESS = 0.1

LOGGER = logging.getLogger(__name__)


def _npv_and_derivative(
    initial: float, payments: np.ndarray, factor: np.float64
) -> tuple[np.float64, np.float64]:
    # Single pass; denominator carries factor ** (i + 1) for payments[i].
    # The derivative term weights payments[i] by its 0-based index i.
    value = np.float64(initial)
    derivative = np.float64(0.0)
    denominator = factor
    for i, payment in enumerate(payments):
        value += payment / denominator
        denominator *= factor
        derivative -= i * payment / denominator
    return value, derivative


def internal_rate_of_return(
    cash_flows,
    guess: float = DEFAULT_GUESS,
    *,
    max_iter: int = MAX_ITERATIONS,
    tol: float = ABSOLUTE_ACCURACY,
) -> float:
    """
    Internal rate of return of a periodic cash flow series via Newton-Raphson.

    Parameters
    ----------
    cash_flows:
        1D series with at least two values; cash_flows[0] is the initial outlay
        at time zero.
    guess:
        Starting rate for the iteration.
    max_iter:
        Maximum number of Newton steps.
    tol:
        Absolute step size at which the iteration is considered converged.

    Returns
    -------
    float
        Rate r with net_present_value(r, cash_flows) == 0, or NaN when the
        iteration hits a zero factor, a zero derivative, or does not converge
        within max_iter steps.
    """
    cash_flows = _validate_cash_flows(cash_flows, min_size=2)
    initial = cash_flows[0]
    payments = cash_flows[1:]
    x0 = np.float64(guess)

    with np.errstate(all="ignore"):
        for iteration in range(int(max_iter)):
            factor = 1.0 + x0
            if factor == 0.0:
                LOGGER.debug("IRR factor 1 + rate is zero at iteration %s.", iteration)
                return float("nan")

            value, derivative = _npv_and_derivative(initial, payments, factor)
            if derivative == 0.0:
                LOGGER.debug("IRR derivative vanished at rate %s.", x0)
                return float("nan")

            x1 = x0 - value / derivative
            if abs(x1 - x0) <= tol:
                return float(x1)
            x0 = x1

    LOGGER.debug("IRR did not converge within %s iterations.", max_iter)
    return float("nan")

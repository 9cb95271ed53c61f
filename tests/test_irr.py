import numpy as np
import pytest
from scipy.optimize import brentq

from timevalue.annuity import net_present_value
from timevalue.irr import internal_rate_of_return

# Level coupons with the principal back in the last period: the root is the coupon rate.
PAR_BOND = [-1.0, 0.05, 0.05, 0.05, 0.05, 1.05]
# One balloon receipt after nine periods: the root is 2 ** (1 / 9) - 1.
BALLOON = [-10.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 20.0]


@pytest.mark.parametrize(
    "cash_flows, guess",
    [
        (PAR_BOND, 0.06),
        (BALLOON, 0.08),
    ],
)
def test_irr_zeroes_npv(cash_flows, guess):
    rate = internal_rate_of_return(cash_flows, guess)
    assert np.isfinite(rate)
    assert abs(net_present_value(rate, cash_flows)) < 1e-5


def test_irr_par_bond_returns_coupon_rate():
    assert np.isclose(internal_rate_of_return(PAR_BOND, 0.06), 0.05, atol=1e-6)


def test_irr_balloon_matches_closed_form():
    assert np.isclose(internal_rate_of_return(BALLOON, 0.08), 2.0 ** (1.0 / 9.0) - 1.0, atol=1e-6)


def test_irr_matches_bracketing_root_finder():
    expected = brentq(lambda r: net_present_value(r, PAR_BOND), 0.0, 1.0, xtol=1e-12)
    assert np.isclose(internal_rate_of_return(PAR_BOND, 0.06), expected, atol=1e-6)


def test_irr_exact_guess_converges_immediately():
    assert internal_rate_of_return(PAR_BOND, 0.05, max_iter=1) == pytest.approx(0.05, abs=1e-12)


def test_irr_two_flows_has_zero_derivative():
    # The only payment sits at index 0 and carries no derivative weight.
    assert np.isnan(internal_rate_of_return([-100.0, 110.0], 0.05))


def test_irr_overshooting_series_returns_nan():
    assert np.isnan(internal_rate_of_return([-100.0, 39.0, 59.0, 55.0, 20.0], 0.1))


def test_irr_all_positive_returns_nan():
    assert np.isnan(internal_rate_of_return([100.0, 50.0, 50.0], 0.1))


def test_irr_zero_factor_returns_nan():
    assert np.isnan(internal_rate_of_return([-100.0, 60.0, 60.0], -1.0))


def test_irr_zero_derivative_returns_nan():
    assert np.isnan(internal_rate_of_return([-100.0, 0.0, 0.0], 0.1))


def test_irr_exhausted_iterations_returns_nan():
    assert np.isnan(internal_rate_of_return(PAR_BOND, 0.2, max_iter=1))


@pytest.mark.parametrize("cash_flows", [[], [-100.0], np.ones((2, 2))])
def test_irr_rejects_short_or_2d_series(cash_flows):
    with pytest.raises(ValueError):
        internal_rate_of_return(cash_flows, 0.1)

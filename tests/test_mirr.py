import numpy as np
import pytest

from timevalue.annuity import net_present_value
from timevalue.mirr import modified_internal_rate_of_return


def test_mirr_two_flows_composes_npv():
    cash_flows = [-100.0, 110.0]
    numerator = net_present_value(0.12, [0.0, 110.0])
    denominator = net_present_value(0.1, [-100.0, 0.0])
    expected = (numerator / denominator) * 1.12 - 1.0

    result = modified_internal_rate_of_return(cash_flows, finance_rate=0.1, reinvest_rate=0.12)
    assert np.isclose(result, expected)


def test_mirr_negative_base_with_fractional_exponent_is_nan():
    result = modified_internal_rate_of_return([-100.0, 50.0, 60.0], 0.1, 0.12)
    assert np.isnan(result)


def test_mirr_without_outflows_is_infinite():
    result = modified_internal_rate_of_return([10.0, 20.0, 30.0], 0.1, 0.12)
    assert np.isinf(result)


def test_mirr_uses_finance_rate_for_outflows_only():
    cash_flows = [-100.0, 110.0]
    low = modified_internal_rate_of_return(cash_flows, 0.0, 0.1)
    high = modified_internal_rate_of_return(cash_flows, 0.5, 0.1)
    # Only cash_flows[0] is negative and it sits at time zero.
    assert low == high


@pytest.mark.parametrize("cash_flows", [[-100.0], np.ones((2, 2))])
def test_mirr_rejects_short_or_2d_series(cash_flows):
    with pytest.raises(ValueError):
        modified_internal_rate_of_return(cash_flows, 0.1, 0.1)

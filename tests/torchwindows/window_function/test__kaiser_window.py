import math

import pytest
import torch
import torch.testing

import torchwindows.window_function as wf
from torchwindows import MissingCapabilityError


class TestKaiserWindow:
    """Tests for kaiser_window."""

    @pytest.mark.parametrize("periodic", [False, True])
    def test_scipy_comparison(self, periodic):
        """The shape parameter is scipy's beta divided by pi."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [2, 9, 64]:
            for beta in [0.0, 1.0, 2.5, 8.0]:
                result = wf.kaiser_window(n, beta, periodic=periodic)
                expected = torch.tensor(
                    scipy_signal.windows.kaiser(
                        n, math.pi * beta, sym=not periodic
                    ),
                    dtype=torch.float64,
                )
                torch.testing.assert_close(
                    result, expected, rtol=1e-10, atol=1e-10
                )

    def test_beta_zero_is_rectangular(self):
        torch.testing.assert_close(
            wf.kaiser_window(12, 0.0), torch.ones(12, dtype=torch.float64)
        )

    def test_peak_is_one(self):
        result = wf.kaiser_window(33, 3.0)
        torch.testing.assert_close(
            result[16], torch.tensor(1.0, dtype=torch.float64)
        )

    def test_injected_bessel_function(self):
        """The Bessel function is taken from the bessel_i0 keyword."""
        calls = []

        def bessel_i0(x):
            calls.append(x.shape)
            return torch.special.i0(x)

        result = wf.kaiser_window(16, 2.0, bessel_i0=bessel_i0)
        torch.testing.assert_close(result, wf.kaiser_window(16, 2.0))
        assert len(calls) == 2

    def test_missing_bessel_function(self):
        with pytest.raises(MissingCapabilityError, match="kaiser_window"):
            wf.kaiser_window(16, 2.0, bessel_i0=None)

    def test_missing_capability_checked_first(self):
        """The capability is checked before n is validated."""
        with pytest.raises(MissingCapabilityError):
            wf.kaiser_window(0, 2.0, bessel_i0=None)

import math

import pytest
import torch
import torch.testing

import torchwindows.window_function as wf


class TestGaussianWindow:
    """Tests for gaussian_window."""

    def test_scipy_comparison(self):
        """beta corresponds to a standard deviation of (n - 1) / (2 beta)."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [5, 16, 64]:
            for beta in [1.0, 2.5]:
                result = wf.gaussian_window(n, beta)
                expected = torch.tensor(
                    scipy_signal.windows.gaussian(n, (n - 1) / (2 * beta)),
                    dtype=torch.float64,
                )
                torch.testing.assert_close(
                    result, expected, rtol=1e-10, atol=1e-10
                )

    def test_endpoints(self):
        result = wf.gaussian_window(5, 2.0)
        torch.testing.assert_close(
            result[0], torch.tensor(math.exp(-2.0), dtype=torch.float64)
        )
        torch.testing.assert_close(
            result[2], torch.tensor(1.0, dtype=torch.float64)
        )

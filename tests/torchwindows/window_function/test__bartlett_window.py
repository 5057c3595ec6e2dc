import pytest
import torch
import torch.testing

import torchwindows.window_function as wf


class TestBartlettWindow:
    """Tests for the triangular windows and bartlett_hann_window."""

    @pytest.mark.parametrize("periodic", [False, True])
    def test_bartlett_scipy_comparison(self, periodic):
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [2, 5, 16, 33]:
            result = wf.bartlett_window(n, periodic=periodic)
            expected = torch.tensor(
                scipy_signal.windows.bartlett(n, sym=not periodic),
                dtype=torch.float64,
            )
            torch.testing.assert_close(
                result, expected, rtol=1e-10, atol=1e-10
            )

    def test_triangular_reference_values(self):
        """The triangular window does not reach zero at the ends."""
        result = wf.triangular_window(3)
        expected = torch.tensor([1 / 3, 1.0, 1 / 3], dtype=torch.float64)
        torch.testing.assert_close(result, expected)

    def test_triangular_positive(self):
        for n in [2, 7, 64]:
            assert bool((wf.triangular_window(n) > 0).all())

    def test_bartlett_hann_scipy_comparison(self):
        """Compare with scipy.signal.windows.barthann."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [3, 8, 65]:
            result = wf.bartlett_hann_window(n)
            expected = torch.tensor(
                scipy_signal.windows.barthann(n), dtype=torch.float64
            )
            torch.testing.assert_close(
                result, expected, rtol=1e-10, atol=1e-10
            )

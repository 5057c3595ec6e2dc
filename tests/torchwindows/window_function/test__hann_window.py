import pytest
import torch
import torch.testing

import torchwindows.window_function as wf
from torchwindows import ParamRangeError


class TestHannWindow:
    """Tests for hann_window."""

    def test_reference_values(self):
        result = wf.hann_window(4)
        expected = torch.tensor([0.0, 0.75, 0.75, 0.0], dtype=torch.float64)
        torch.testing.assert_close(result, expected, rtol=1e-10, atol=1e-10)

    def test_scipy_comparison_symmetric(self):
        """Compare with scipy.signal.windows.hann (symmetric)."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [2, 5, 64, 129]:
            result = wf.hann_window(n)
            expected = torch.tensor(
                scipy_signal.windows.hann(n, sym=True), dtype=torch.float64
            )
            torch.testing.assert_close(
                result, expected, rtol=1e-10, atol=1e-10
            )

    def test_scipy_comparison_periodic(self):
        """Compare with scipy.signal.windows.hann (periodic)."""
        scipy_signal = pytest.importorskip("scipy.signal")
        for n in [2, 5, 64, 128]:
            result = wf.hann_window(n, periodic=True)
            expected = torch.tensor(
                scipy_signal.windows.hann(n, sym=False), dtype=torch.float64
            )
            torch.testing.assert_close(
                result, expected, rtol=1e-10, atol=1e-10
            )

    def test_equals_cos_alpha_two(self):
        for n in [1, 7, 64]:
            torch.testing.assert_close(
                wf.hann_window(n),
                wf.cos_alpha_window(n, 2.0),
                rtol=1e-10,
                atol=1e-10,
            )

    def test_hann_matlab_drops_zero_endpoints(self):
        """hann_matlab(n) is hann(n + 2) without its endpoints."""
        for n in [1, 6, 31]:
            torch.testing.assert_close(
                wf.hann_matlab_window(n),
                wf.hann_window(n + 2)[1:-1],
                rtol=1e-10,
                atol=1e-10,
            )

    def test_hann_matlab_has_no_periodic_form(self):
        with pytest.raises(TypeError):
            wf.hann_matlab_window(8, periodic=True)

    def test_default_dtype(self):
        assert wf.hann_window(8).dtype == torch.float64

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype(self, dtype):
        result = wf.hann_window(16, dtype=dtype)
        assert result.dtype == dtype

    def test_single_point(self):
        assert wf.hann_window(1).shape == (1,)

    @pytest.mark.parametrize("n", [0, -3, 2.5, True])
    def test_invalid_n(self, n):
        with pytest.raises(ParamRangeError, match="hann_window"):
            wf.hann_window(n)

import pytest
import torch
import torch.testing

import torchwindows.window_function as wf


class TestCosAlphaWindow:
    """Tests for cos_alpha_window, cosine_window and rectangular_window."""

    @pytest.mark.parametrize("n", [1, 2, 7, 64])
    @pytest.mark.parametrize("periodic", [False, True])
    def test_alpha_zero_is_rectangular(self, n, periodic):
        torch.testing.assert_close(
            wf.cos_alpha_window(n, 0.0, periodic=periodic),
            wf.rectangular_window(n, periodic=periodic),
        )

    @pytest.mark.parametrize("n", [1, 2, 7, 64])
    @pytest.mark.parametrize("periodic", [False, True])
    def test_alpha_one_is_cosine(self, n, periodic):
        torch.testing.assert_close(
            wf.cos_alpha_window(n, 1.0, periodic=periodic),
            wf.cosine_window(n, periodic=periodic),
        )

    @pytest.mark.parametrize("n", [1, 2, 7, 64])
    @pytest.mark.parametrize("periodic", [False, True])
    def test_alpha_two_is_hann(self, n, periodic):
        torch.testing.assert_close(
            wf.cos_alpha_window(n, 2.0, periodic=periodic),
            wf.hann_window(n, periodic=periodic),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_cosine_reference_values(self):
        result = wf.cosine_window(3)
        expected = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        torch.testing.assert_close(result, expected, rtol=0, atol=1e-15)

    def test_rectangular(self):
        torch.testing.assert_close(
            wf.rectangular_window(10), torch.ones(10, dtype=torch.float64)
        )
        assert wf.rectangular_window(10, dtype=torch.float32).dtype == (
            torch.float32
        )

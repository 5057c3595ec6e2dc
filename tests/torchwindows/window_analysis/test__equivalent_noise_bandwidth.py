import math

import pytest
import torch
import torch.testing

import torchwindows.window_function as wf
from torchwindows.window_analysis import (
    coherent_gain,
    equivalent_noise_bandwidth,
    processing_gain,
)


class TestEquivalentNoiseBandwidth:
    """Tests for the scalar window metrics."""

    def test_rectangular(self):
        result = equivalent_noise_bandwidth(wf.rectangular_window(16384))
        assert math.isclose(result.item(), 1.0, rel_tol=1e-12)

    def test_hamming(self):
        result = equivalent_noise_bandwidth(wf.hamming_window(16384))
        assert math.isclose(result.item(), 1.36288567, abs_tol=1e-7)

    def test_hann(self):
        """The Hann ENBW tends to 1.5 bins."""
        result = equivalent_noise_bandwidth(wf.hann_window(16384))
        assert math.isclose(result.item(), 1.5, abs_tol=1e-3)

    @pytest.mark.parametrize("scale", [0.5, 3.0, 1000.0])
    def test_scale_invariant(self, scale):
        w = wf.blackman_window(257)
        torch.testing.assert_close(
            equivalent_noise_bandwidth(scale * w),
            equivalent_noise_bandwidth(w),
        )

    def test_coherent_gain(self):
        assert coherent_gain(wf.rectangular_window(10)).item() == 1.0
        result = coherent_gain(wf.hann_window(16384, periodic=True))
        assert math.isclose(result.item(), 0.5, abs_tol=1e-12)

    def test_processing_gain(self):
        w = wf.kaiser_window(128, 2.0)
        torch.testing.assert_close(
            processing_gain(w), 1 / equivalent_noise_bandwidth(w)
        )

import torch
import torch.testing

import torchwindows.window_function as wf


class TestHannPoissonWindow:
    """Tests for hann_poisson_window."""

    def test_alpha_zero_is_hann(self):
        torch.testing.assert_close(
            wf.hann_poisson_window(17, 0.0),
            wf.hann_window(17),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_is_hann_times_poisson(self):
        torch.testing.assert_close(
            wf.hann_poisson_window(17, 2.0),
            wf.hann_window(17) * wf.poisson_window(17, 2.0),
            rtol=1e-10,
            atol=1e-10,
        )

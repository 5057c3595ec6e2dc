import pytest
import torch
import torch.testing

import torchwindows.window_function as wf
from torchwindows import ParamRangeError
from torchwindows.window_analysis import frequency_response


class TestFrequencyResponse:
    """Tests for frequency_response."""

    def test_length_uses_min_bins(self):
        assert frequency_response(wf.hann_window(64)).shape == (1000,)
        assert frequency_response(wf.hann_window(64), 256).shape == (256,)

    def test_length_doubles_long_windows(self):
        assert frequency_response(wf.hann_window(1200)).shape == (2400,)

    def test_rectangular_peak(self):
        """The zero frequency sits at the center with value (sum w)^2."""
        result = frequency_response(wf.rectangular_window(16))
        torch.testing.assert_close(
            result[499], torch.tensor(256.0, dtype=torch.float64)
        )
        torch.testing.assert_close(
            result[500], torch.tensor(256.0, dtype=torch.float64)
        )
        assert torch.argmax(result).item() in (499, 500)

    def test_symmetric(self):
        result = frequency_response(wf.blackman_window(51), 512)
        torch.testing.assert_close(result, torch.flip(result, [0]))

    def test_right_half_is_power_spectrum(self):
        """Bins h + j hold |X_j|^2 for the rfft X of the padded window."""
        w = wf.hamming_window(10)
        result = frequency_response(w, 8)
        assert result.shape == (20,)
        power = torch.abs(torch.fft.rfft(w, n=20)) ** 2
        torch.testing.assert_close(result[11:], power[1:10])

    def test_left_half_mirrors_right_half(self):
        result = frequency_response(wf.hamming_window(10), 8)
        torch.testing.assert_close(
            torch.flip(result[:10], [0]), result[10:]
        )

    def test_center_bins(self):
        """The centre pair holds the zero and Nyquist real parts."""
        result = frequency_response(wf.rectangular_window(3), 8)
        # Bin 0 sums to 3 and the Nyquist bin to 1 - 1 + 1.
        torch.testing.assert_close(
            result[3:5], torch.tensor([10.0, 10.0], dtype=torch.float64)
        )
        # |1 + exp(-i pi / 4) + exp(-i pi / 2)|^2
        torch.testing.assert_close(
            result[5], torch.tensor(3.0 + 2.0 * 2.0**0.5, dtype=torch.float64)
        )

    def test_non_negative(self):
        assert bool((frequency_response(wf.tukey_window(40, 0.3)) >= 0).all())

    @pytest.mark.parametrize("min_bins", [0, -2, 7, 10.0, True])
    def test_invalid_min_bins(self, min_bins):
        with pytest.raises(ParamRangeError, match="min_bins"):
            frequency_response(wf.hann_window(8), min_bins)

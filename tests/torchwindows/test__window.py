import pytest
import torch
import torch.testing

import torchwindows.window_function as wf
from torchwindows import UnknownWindowError, Window
from torchwindows.registry import Capabilities, WindowRegistry
from torchwindows.window_analysis import frequency_response


class TestWindow:
    """Tests for the Window object."""

    def test_samples(self):
        w = Window(8, "hann")
        torch.testing.assert_close(w.samples(), wf.hann_window(8))

    def test_default_is_hamming(self):
        torch.testing.assert_close(
            Window(8).get_samples(), wf.hamming_window(8)
        )

    def test_get_samples_is_cached(self):
        w = Window(16, "tukey", 0.5)
        assert w.get_samples() is w.get_samples()

    def test_samples_regenerates(self):
        w = Window(16, "tukey", 0.5)
        first = w.get_samples()
        second = w.samples()
        assert first is not second
        torch.testing.assert_close(first, second)
        assert w.get_samples() is second

    def test_modfreqs(self):
        w = Window(16, "hann", periodic=True)
        torch.testing.assert_close(
            w.modfreqs(min_bins=64),
            frequency_response(wf.hann_window(16, periodic=True), 64),
        )

    def test_get_modfreqs_is_cached(self):
        w = Window(16, "hann")
        result = w.get_modfreqs()
        assert result.shape == (1000,)
        assert w.get_modfreqs() is result

    def test_metrics(self):
        w = Window(16384, "rectangular")
        assert abs(w.enbw().item() - 1.0) < 1e-12
        assert abs(w.coherent_gain().item() - 1.0) < 1e-12
        assert abs(w.process_gain().item() - 1.0) < 1e-12

    def test_get_name(self):
        assert Window(8, "blackman").get_name() == "'classic' Blackman window"
        assert Window(8, "tukey", 0.5).get_name() == "Tukey window"

    def test_get_param_names(self):
        assert Window(8, "hann").get_param_names() is None
        assert Window(8, "cauchy", 2.0).get_param_names() == ("alpha",)

    def test_format_param_vals(self):
        assert Window(8, "hann").format_param_vals() == ""
        assert Window(8, "tukey", 0.5).format_param_vals() == "alpha = 0.5"
        assert (
            Window(8, "blackman_gen3", [0.42, 0.5, 0.08]).format_param_vals()
            == "a0 = 0.42, a1 = 0.5, a2 = 0.08"
        )

    def test_unknown_periodic_window(self):
        with pytest.raises(UnknownWindowError, match="periodic"):
            Window(8, "chebyshev", 50.0, periodic=True)

    def test_custom_registry(self):
        registry = WindowRegistry(Capabilities(bessel_i0=None))
        w = Window(8, "hann", registry=registry)
        assert w.registry is registry
        torch.testing.assert_close(w.samples(), wf.hann_window(8))

    def test_repr(self):
        assert repr(Window(8, "tukey", 0.5)) == (
            "Window(n=8, name='tukey', params=[0.5], periodic=False)"
        )

    def test_get_n_and_get_params(self):
        w = Window(12, "blackman_gen3", [0.42, 0.5, 0.08])
        assert w.get_n() == 12
        assert w.get_params() == (0.42, 0.5, 0.08)
        assert Window(8, "hann").get_params() == ()

    def test_get_single_attribute(self):
        w = Window(8, "tukey", 0.5, periodic=True)
        assert w.get("n") == 8
        assert w.get("name") == "tukey"
        assert w.get("params") == (0.5,)
        assert w.get("periodic") is True

    def test_get_computes_samples_and_modfreqs(self):
        w = Window(16, "hann")
        samples, modfreqs = w.get("samples", "modfreqs")
        assert samples is w.get_samples()
        assert modfreqs is w.get_modfreqs()
        torch.testing.assert_close(samples, wf.hann_window(16))

    def test_get_unknown_attribute(self):
        with pytest.raises(AttributeError, match="registry"):
            Window(8, "hann").get("registry")

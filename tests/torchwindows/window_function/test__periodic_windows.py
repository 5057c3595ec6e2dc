import pytest
import torch
import torch.testing

from torchwindows.registry import WINDOW_DEFINITIONS

PARAMETERS = {
    "blackman_gen": (0.16,),
    "blackman_gen3": (0.42, 0.5, 0.08),
    "blackman_gen4": (0.35875, 0.48829, 0.14128, 0.01168),
    "blackman_gen5": (0.3, 0.4, 0.2, 0.08, 0.02),
    "cauchy": (3.0,),
    "chebyshev": (60.0,),
    "cos_alpha": (1.5,),
    "dpss": (1.0,),
    "gaussian": (2.5,),
    "hamming_gen": (0.6,),
    "hann_poisson": (1.0,),
    "kaiser": (2.0,),
    "poisson": (2.0,),
    "tukey": (0.5,),
}

PERIODIC = sorted(
    name for name, definition in WINDOW_DEFINITIONS.items()
    if definition.periodic
)


class TestPeriodicWindows:
    """Properties shared by every window in the catalog."""

    def test_parameters_cover_catalog(self):
        for name, definition in WINDOW_DEFINITIONS.items():
            assert len(PARAMETERS.get(name, ())) == len(definition.parameters)

    @pytest.mark.parametrize("name", PERIODIC)
    @pytest.mark.parametrize("n", [100, 101])
    def test_periodic_is_truncated_symmetric(self, name, n):
        """The periodic window is the symmetric window of n + 1 points."""
        generator = WINDOW_DEFINITIONS[name].generator
        params = PARAMETERS.get(name, ())
        periodic = generator(n, *params, periodic=True)
        symmetric = generator(n + 1, *params)
        torch.testing.assert_close(
            periodic, symmetric[:n], rtol=1e-10, atol=1e-10
        )

    @pytest.mark.parametrize("name", sorted(WINDOW_DEFINITIONS))
    @pytest.mark.parametrize("n", [1, 2, 3, 16, 17])
    def test_length(self, name, n):
        generator = WINDOW_DEFINITIONS[name].generator
        result = generator(n, *PARAMETERS.get(name, ()))
        assert result.shape == (n,)
        assert result.dtype == torch.float64

    @pytest.mark.parametrize("name", PERIODIC)
    def test_periodic_single_point(self, name):
        generator = WINDOW_DEFINITIONS[name].generator
        result = generator(1, *PARAMETERS.get(name, ()), periodic=True)
        assert result.shape == (1,)

    @pytest.mark.parametrize("name", sorted(WINDOW_DEFINITIONS))
    def test_symmetric(self, name):
        generator = WINDOW_DEFINITIONS[name].generator
        result = generator(33, *PARAMETERS.get(name, ()))
        torch.testing.assert_close(
            result, torch.flip(result, [0]), rtol=1e-8, atol=1e-10
        )

    @pytest.mark.parametrize("name", sorted(WINDOW_DEFINITIONS))
    def test_float32(self, name):
        generator = WINDOW_DEFINITIONS[name].generator
        result = generator(8, *PARAMETERS.get(name, ()), dtype=torch.float32)
        assert result.dtype == torch.float32

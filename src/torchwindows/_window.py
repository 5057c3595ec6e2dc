from typing import Optional, Tuple

from torch import Tensor

from torchwindows.registry import DEFAULT_REGISTRY, WindowRegistry
from torchwindows.registry._window_registry import (
    Parameters,
    as_parameter_tuple,
)
from torchwindows.window_analysis import (
    coherent_gain,
    equivalent_noise_bandwidth,
    frequency_response,
    processing_gain,
)


class Window:
    """
    A named window together with its samples and derived metrics.

    Samples and the frequency response are computed on demand. The
    ``samples`` and ``modfreqs`` methods always recompute and store the
    result; ``get_samples`` and ``get_modfreqs`` return the stored
    result, computing it first if there is none.

    Parameters
    ----------
    n : int
        Number of points in the window.
    name : str, optional
        Window name. Default "hamming".
    params : float or sequence of float, optional
        Parameters of the window.
    periodic : bool, optional
        If True, use the periodic form.
    registry : WindowRegistry, optional
        Registry used to resolve the name. Default the process-wide
        registry.

    Raises
    ------
    UnknownWindowError
        If the window does not exist in the requested mode.

    Examples
    --------
    >>> w = Window(10, "tukey", 0.5)
    >>> w.get_name()
    'Tukey window'
    >>> w.format_param_vals()
    'alpha = 0.5'
    """

    def __init__(
        self,
        n: int,
        name: str = "hamming",
        params: Parameters = None,
        periodic: bool = False,
        registry: Optional[WindowRegistry] = None,
    ):
        if registry is None:
            registry = DEFAULT_REGISTRY

        self.registry = registry
        self.definition = registry.definition(name, periodic)

        self.n = n
        self.name = self.definition.name
        self.params = as_parameter_tuple(params)
        self.periodic = periodic

        self._samples: Optional[Tensor] = None
        self._modfreqs: Optional[Tensor] = None

    def __repr__(self) -> str:
        return (
            f"Window(n={self.n}, name={self.name!r}, "
            f"params={list(self.params)}, periodic={self.periodic})"
        )

    def samples(self) -> Tensor:
        """Generate, store and return the window samples."""
        self._samples = self.registry.resolve(
            self.n, self.name, self.params, self.periodic
        )
        self._modfreqs = None

        return self._samples

    def get_samples(self) -> Tensor:
        if self._samples is None:
            return self.samples()

        return self._samples

    def modfreqs(self, min_bins: int = 1000) -> Tensor:
        """Compute, store and return the frequency response."""
        self._modfreqs = frequency_response(self.get_samples(), min_bins)

        return self._modfreqs

    def get_modfreqs(self) -> Tensor:
        if self._modfreqs is None:
            return self.modfreqs()

        return self._modfreqs

    def enbw(self) -> Tensor:
        return equivalent_noise_bandwidth(self.get_samples())

    def coherent_gain(self) -> Tensor:
        return coherent_gain(self.get_samples())

    def process_gain(self) -> Tensor:
        return processing_gain(self.get_samples())

    def get_n(self) -> int:
        return self.n

    def get_params(self) -> Tuple[float, ...]:
        return self.params

    def get(self, *attributes: str):
        """
        Return one or more attributes by name.

        ``"samples"`` and ``"modfreqs"`` are computed first if they have
        not been. A single name returns its value, several names return a
        tuple of values in the same order.

        Raises
        ------
        AttributeError
            If a name is not one of "n", "name", "params", "periodic",
            "samples" or "modfreqs".
        """
        getters = {
            "n": self.get_n,
            "name": lambda: self.name,
            "params": self.get_params,
            "periodic": lambda: self.periodic,
            "samples": self.get_samples,
            "modfreqs": self.get_modfreqs,
        }

        values = []
        for attribute in attributes:
            if attribute not in getters:
                raise AttributeError(
                    f"Window has no attribute {attribute!r}"
                )

            values.append(getters[attribute]())

        if len(values) == 1:
            return values[0]

        return tuple(values)

    def get_name(self) -> str:
        """Printable name of the window, e.g. "'classic' Blackman window"."""
        return self.definition.title

    def get_param_names(self) -> Optional[Tuple[str, ...]]:
        """Names of the window's parameters, or None if it has none."""
        return self.definition.parameters or None

    def format_param_vals(self) -> str:
        """Format the parameters as ``"name = value, ..."``."""
        if not self.params or not self.definition.parameters:
            return ""

        return ", ".join(
            f"{name} = {value}"
            for name, value in zip(self.definition.parameters, self.params)
        )

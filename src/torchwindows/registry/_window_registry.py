import logging
import re
from numbers import Real
from typing import List, Mapping, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchwindows._exceptions import (
    ArityError,
    MissingCapabilityError,
    UnknownWindowError,
)

from ._capabilities import Capabilities
from ._window_definition import WindowDefinition
from ._window_definitions import WINDOW_DEFINITIONS

logger = logging.getLogger(__name__)

PERIODIC_SUFFIX = "_per"

Parameters = Union[None, float, Sequence[float]]


class WindowRegistry:
    """
    Name-based access to the window catalog.

    The registry splits the catalog into a symmetric and a periodic
    sub-registry, and checks once, at construction, which windows cannot
    be generated with the given :class:`Capabilities`.

    Parameters
    ----------
    capabilities : Capabilities, optional
        Numerical routines to inject into the windows that need them.
        Default ``Capabilities()``, backed by PyTorch.
    definitions : Mapping[str, WindowDefinition], optional
        Catalog to serve. Default ``WINDOW_DEFINITIONS``.

    Examples
    --------
    >>> registry = WindowRegistry()
    >>> registry.resolve(4, "hann")
    tensor([0.0000, 0.7500, 0.7500, 0.0000], dtype=torch.float64)
    """

    def __init__(
        self,
        capabilities: Optional[Capabilities] = None,
        definitions: Optional[Mapping[str, WindowDefinition]] = None,
    ):
        if capabilities is None:
            capabilities = Capabilities()

        if definitions is None:
            definitions = WINDOW_DEFINITIONS

        self.capabilities = capabilities
        self.definitions = definitions

        self._symmetric = dict(self.definitions)
        self._periodic = {
            name: definition
            for name, definition in self.definitions.items()
            if definition.periodic
        }

        missing = set(self.capabilities.missing())

        self._unavailable = {
            name: definition.capability
            for name, definition in self.definitions.items()
            if definition.capability in missing
        }

        if self._unavailable:
            logger.debug(
                "windows unavailable for lack of capabilities: %s",
                ", ".join(sorted(self._unavailable)),
            )

    def resolve(
        self,
        n: int,
        name: str = "hamming",
        params: Parameters = None,
        periodic: bool = False,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """
        Generate the samples of a named window.

        Parameters
        ----------
        n : int
            Number of points in the window.
        name : str, optional
            Canonical window name. A trailing ``"_per"`` is ignored; use
            ``periodic`` to select the periodic form. Default "hamming".
        params : float or sequence of float, optional
            Parameters of the window. A single number is accepted for
            windows that take one parameter.
        periodic : bool, optional
            If True, generate the periodic form.
        dtype : torch.dtype, optional
            The desired data type of the returned tensor.
        device : torch.device, optional
            The desired device of the returned tensor.

        Returns
        -------
        Tensor
            A 1-D tensor of size (n,).

        Raises
        ------
        UnknownWindowError
            If the window does not exist in the requested mode.
        MissingCapabilityError
            If the window needs a routine that is unavailable.
        ArityError
            If the number of parameters does not match the window.
        """
        definition = self._lookup(name, periodic)

        if definition.name in self._unavailable:
            raise MissingCapabilityError(
                f"{definition.name}: required capability "
                f"'{self._unavailable[definition.name]}' is not available"
            )

        arguments = as_parameter_tuple(params)

        expected = len(definition.parameters) + 1
        if len(arguments) + 1 != expected:
            raise ArityError(
                f"{definition.name}: {expected} "
                f"argument{'' if expected == 1 else 's'} expected. "
                f"Got {len(arguments) + 1} arguments."
            )

        options = {"dtype": dtype, "device": device}

        if periodic:
            options["periodic"] = True

        if definition.capability is not None:
            options[definition.capability] = getattr(
                self.capabilities, definition.capability
            )

        logger.debug(
            "generating %s %s window of %s points with parameters %s",
            "periodic" if periodic else "symmetric",
            definition.name,
            n,
            arguments,
        )

        return definition.generator(n, *arguments, **options)

    def list_windows(self, pattern: Optional[str] = None) -> List[str]:
        """
        List canonical window names.

        Parameters
        ----------
        pattern : str, optional
            Case-insensitive regular expression. If given, only windows
            whose name matches are listed. A window whose name does not
            match but one of whose aliases does is listed as
            ``"name (alias X)"``, with X the first matching alias.

        Returns
        -------
        list of str
            Sorted by canonical name.
        """
        names = sorted(self._symmetric)

        if not pattern:
            return names

        expression = re.compile(pattern, re.IGNORECASE)

        matches = []
        for name in names:
            if expression.search(name):
                matches.append(name)
                continue

            aliases = [
                alias
                for alias in self._symmetric[name].aliases
                if expression.search(alias)
            ]
            if aliases:
                matches.append(f"{name} (alias {aliases[0]})")

        return matches

    def definition(
        self, name: str, periodic: bool = False
    ) -> WindowDefinition:
        """Return the catalog entry of a window in the given mode."""
        return self._lookup(name, periodic)

    def parameter_names(self, name: str) -> Tuple[str, ...]:
        """Return the names of a window's parameters, possibly empty."""
        return self._lookup(name, False).parameters

    def _lookup(self, name: str, periodic: bool) -> WindowDefinition:
        if name.endswith(PERIODIC_SUFFIX):
            name = name[: -len(PERIODIC_SUFFIX)]

        table = self._periodic if periodic else self._symmetric

        try:
            return table[name]
        except KeyError:
            mode = "periodic" if periodic else "symmetric"

            raise UnknownWindowError(
                f"window: Unknown {mode} window '{name}'."
            ) from None


def as_parameter_tuple(params: Parameters) -> Tuple[float, ...]:
    """Normalize window parameters to a tuple, wrapping a bare number."""
    if params is None:
        return ()

    if isinstance(params, Tensor):
        if params.dim() == 0:
            return (params.item(),)

        return tuple(params.tolist())

    if isinstance(params, Real):
        return (params,)

    return tuple(params)

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import torch
from torch import Tensor


@dataclass(frozen=True)
class Capabilities:
    """
    Optional numerical routines some windows depend on.

    A field set to None marks the routine as unavailable; windows that
    need it are then rejected with
    :class:`~torchwindows.MissingCapabilityError`.

    Attributes
    ----------
    bessel_i0 : callable, optional
        Elementwise modified Bessel function I0. Needed by ``kaiser``.
    eigh : callable, optional
        Symmetric eigensolver returning ``(eigenvalues, eigenvectors)``.
        Needed by ``dpss``.
    """

    bessel_i0: Optional[Callable[[Tensor], Tensor]] = torch.special.i0
    eigh: Optional[Callable[[Tensor], Tuple[Tensor, Tensor]]] = (
        torch.linalg.eigh
    )

    def missing(self) -> Tuple[str, ...]:
        """Names of the routines that are unavailable."""
        return tuple(
            name
            for name in ("bessel_i0", "eigh")
            if getattr(self, name) is None
        )

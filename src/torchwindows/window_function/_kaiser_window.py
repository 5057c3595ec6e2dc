import math
from typing import Callable, Optional

import torch
from torch import Tensor

from torchwindows._exceptions import MissingCapabilityError

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def kaiser_window(
    n: int,
    beta: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    bessel_i0: Optional[Callable[[Tensor], Tensor]] = torch.special.i0,
) -> Tensor:
    """
    Kaiser (Kaiser-Bessel) window function.

    Mathematical Definition
    -----------------------
        w[k] = I0(pi * beta * sqrt(1 - x_k^2)) / I0(pi * beta)

    where x_k are n points evenly spaced from -1 through 1 and I0 is the
    zeroth-order modified Bessel function of the first kind.

    Note that ``beta`` is scaled by pi. ``kaiser_window(n, b)`` equals
    ``scipy.signal.windows.kaiser(n, pi * b)``.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    beta : float
        Shape parameter. Larger values give a narrower window.
    periodic : bool, optional
        If True, return the periodic window for spectral analysis.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.
    bessel_i0 : callable, optional
        Elementwise I0 implementation. Default ``torch.special.i0``.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.

    Raises
    ------
    MissingCapabilityError
        If ``bessel_i0`` is None.
    """
    if bessel_i0 is None:
        raise MissingCapabilityError(
            "kaiser_window: no modified Bessel function I0 available"
        )

    steps = sample_count("kaiser_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    b = float(beta) * math.pi

    numerator = bessel_i0(b * torch.sqrt(torch.clamp(1 - x**2, min=0.0)))
    denominator = bessel_i0(torch.tensor(b, dtype=x.dtype, device=x.device))

    return (numerator / denominator)[:n]

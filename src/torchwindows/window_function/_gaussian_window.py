from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def gaussian_window(
    n: int,
    beta: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Gaussian window function.

    Computes a Gaussian (Weierstrass) window of length n.

    Mathematical Definition
    -----------------------
        w[k] = exp(-0.5 * (beta * x_k)^2)

    where x_k are n points evenly spaced from -1 through 1. Here beta is
    the reciprocal of the standard deviation measured in half-widths of
    the window.

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

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.
    """
    steps = sample_count("gaussian_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return torch.exp(-0.5 * (float(beta) * x) ** 2)[:n]

from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def welch_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Welch window function.

    Computes a Welch window of length n. The Welch window is a parabolic
    window, also known as the Riez, Bochner, Parzen or parabolic window.

    Mathematical Definition
    -----------------------
        w[k] = 1 - x_k^2

    where x_k are n points evenly spaced from -1 through 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
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

    Examples
    --------
    >>> welch_window(6)
    tensor([0.0000, 0.6400, 0.9600, 0.9600, 0.6400, 0.0000], dtype=torch.float64)
    """
    steps = sample_count("welch_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return (1 - x**2)[:n]

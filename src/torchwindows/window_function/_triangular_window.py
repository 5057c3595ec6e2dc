from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def triangular_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Triangular window function.

    Mathematical Definition
    -----------------------
    The symmetric triangular window is defined as:

        w[k] = 1 - |x_k|

    where x_k are n points evenly spaced from -(n-1)/n through (n-1)/n,
    so that unlike the Bartlett window the endpoints are not zero.

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

    See Also
    --------
    bartlett_window : Triangle reaching zero at the endpoints.
    """
    steps = sample_count("triangular_window", n, periodic)

    end = (steps - 1) / steps
    x = linspace(-end, end, steps, dtype, device)

    return (1 - torch.abs(x))[:n]

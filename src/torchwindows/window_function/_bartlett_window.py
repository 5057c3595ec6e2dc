from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def bartlett_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Bartlett window function.

    Computes a Bartlett (Fejer) window of length n: a triangle that
    reaches zero at both endpoints of the symmetric window.

    Mathematical Definition
    -----------------------
    The symmetric Bartlett window is defined as:

        w[k] = 1 - |x_k|

    where x_k are n points evenly spaced from -1 through 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    periodic : bool, optional
        If True, return the periodic window for spectral analysis.
        Default False.
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
    triangular_window : Triangle that does not reach zero at the endpoints.
    """
    steps = sample_count("bartlett_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return (1 - torch.abs(x))[:n]

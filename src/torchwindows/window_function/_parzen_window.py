from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def parzen_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Parzen (Jackson, de la Vallee Poussin) window function.

    A piecewise cubic approximation of a Gaussian.

    Mathematical Definition
    -----------------------
    For x_k evenly spaced from -1 through 1:

        w[k] = 2 (1 - |x_k|)^3                 for |x_k| >= 1/2
        w[k] = 1 - 6 x_k^2 (1 - |x_k|)         for |x_k| < 1/2

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
    parzen_octave_window : The variant computed by Octave's ``parzenwin``.
    """
    steps = sample_count("parzen_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)
    a = torch.abs(x)

    w = torch.where(
        a >= 0.5,
        2 * torch.pow(1 - a, 3),
        1 - 6 * x**2 * (1 - a),
    )

    return w[:n]

import math
from typing import Optional

import torch
from torch import Tensor

from torchwindows._exceptions import ParamRangeError

from ._sampling import DEFAULT_DTYPE, arity_checked, linspace, sample_count


@arity_checked
def tukey_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Tukey (tapered cosine) window function.

    Computes a Tukey window of length n. The window is flat in the middle
    and tapers to zero at both ends with half-period cosine lobes. The
    fraction of the window inside the tapers is controlled by ``alpha``.

    Mathematical Definition
    -----------------------
    For x_k evenly spaced from 0 through 1 and d_k = min(x_k, 1 - x_k):

        w[k] = 0.5 * (1 + cos(pi * (2 d_k / alpha - 1)))   for d_k < alpha/2
        w[k] = 1                                           otherwise

    Special Cases
    -------------
    - alpha = 0: rectangular window (all ones)
    - alpha = 1: Hann window

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    alpha : float
        Fraction of the window inside the cosine tapers, in [0, 1].
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

    Raises
    ------
    ParamRangeError
        If ``alpha`` is outside [0, 1].

    References
    ----------
    .. [1] J. W. Tukey, "An introduction to the calculations of numerical
           spectrum analysis," Spectral Analysis of Time Series, 1967.
    """
    steps = sample_count("tukey_window", n, periodic)

    alpha = float(alpha)

    if not 0.0 <= alpha <= 1.0:
        raise ParamRangeError(
            f"tukey_window: alpha must be between 0 and 1, got {alpha}"
        )

    if alpha == 0.0:
        return torch.ones(n, dtype=dtype or DEFAULT_DTYPE, device=device)

    x = linspace(0.0, 1.0, steps, dtype, device)
    d = torch.minimum(x, 1 - x)

    taper = 0.5 * (1 + torch.cos(math.pi * (2 * d / alpha - 1)))

    return torch.where(d < alpha / 2, taper, torch.ones_like(x))[:n]

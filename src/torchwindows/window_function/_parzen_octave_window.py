from typing import Optional

import torch
from torch import Tensor

from ._sampling import DEFAULT_DTYPE, arity_checked, sample_count


@arity_checked
def parzen_octave_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Parzen window function as computed by Octave's ``parzenwin``.

    Unlike :func:`parzen_window` the samples are placed at the integers
    k - (n - 1) / 2 and scaled by n / 2, so the endpoints are not zero.
    No periodic form is defined.

    Mathematical Definition
    -----------------------
    With r = (n - 1) / 4 and a_k = |k| / (n / 2):

        w[k] = 1 - 6 a_k^2 + 6 a_k^3      for |k| <= r
        w[k] = 2 (1 - a_k)^3              otherwise

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.
    """
    sample_count("parzen_octave_window", n)

    k = torch.arange(n, dtype=dtype or DEFAULT_DTYPE, device=device)
    k = torch.abs(k - (n - 1) / 2)

    a = k / (n / 2)

    return torch.where(
        k <= (n - 1) / 4,
        1 - 6 * a**2 + 6 * a**3,
        2 * torch.pow(1 - a, 3),
    )

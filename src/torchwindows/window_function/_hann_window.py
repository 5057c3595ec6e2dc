from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

HANN_COEFFICIENTS = (0.5, 0.5)


@arity_checked
def hann_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hann window function.

    Computes a Hann window of length n. The Hann window is a raised
    cosine window that tapers smoothly to zero at the endpoints, reducing
    spectral leakage in Fourier analysis. Also known as the hanning window.

    Mathematical Definition
    -----------------------
    The symmetric Hann window is defined as:

        w[k] = 0.5 - 0.5 * cos(2 * pi * k / (n - 1)),  for k = 0, 1, ..., n-1

    The periodic window uses the denominator n instead of n - 1.

    Properties
    ----------
    - Side lobe level: -31.5 dB
    - The symmetric window is exactly zero at both endpoints
    - Equal to cos_alpha_window(n, 2)

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
    hann_matlab_window : Hann window without its zero endpoints.

    Examples
    --------
    >>> hann_window(4)
    tensor([0.0000, 0.7500, 0.7500, 0.0000], dtype=torch.float64)
    """
    return cosine_sum_window(
        "hann_window",
        n,
        HANN_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

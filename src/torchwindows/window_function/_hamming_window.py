from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

HAMMING_COEFFICIENTS = (0.54, 0.46)


@arity_checked
def hamming_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hamming window function.

    Computes a Hamming window of length n. The Hamming window is a raised
    cosine window optimized to minimize the nearest side lobe. Unlike the
    Hann window, it does not reach zero at the endpoints.

    Mathematical Definition
    -----------------------
    The symmetric Hamming window is defined as:

        w[k] = 0.54 - 0.46 * cos(2 * pi * k / (n - 1)),  for k = 0, 1, ..., n-1

    Properties
    ----------
    - Side lobe level: -42.7 dB
    - Endpoint value: 0.08
    - Equivalent noise bandwidth: about 1.36 bins

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
    hamming_ex_window : Hamming window with the 'exact' coefficients.
    hamming_gen_window : Single parameter Hamming family.

    Examples
    --------
    >>> hamming_window(4)
    tensor([0.0800, 0.7700, 0.7700, 0.0800], dtype=torch.float64)
    """
    return cosine_sum_window(
        "hamming_window",
        n,
        HAMMING_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

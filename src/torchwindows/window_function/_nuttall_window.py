from typing import Optional

import torch
from torch import Tensor

from ._blackman_nuttall_window import BLACKMAN_NUTTALL_COEFFICIENTS
from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked


@arity_checked
def nuttall_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Nuttall window function.

    Uses the same coefficients as :func:`blackman_nuttall_window`,
    a0 = 0.3635819, a1 = 0.4891775, a2 = 0.1365995, a3 = 0.0106411.

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
    nuttall1_window : The window computed by Octave's ``nuttallwin``.
    """
    return cosine_sum_window(
        "nuttall_window",
        n,
        BLACKMAN_NUTTALL_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

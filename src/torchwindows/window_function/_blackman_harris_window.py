from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_HARRIS_COEFFICIENTS = (0.422323, 0.49755, 0.07922)


@arity_checked
def blackman_harris_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Harris window function (three term).

    The minimum three term (sample) Blackman-Harris window, with
    coefficients a0 = 0.422323, a1 = 0.49755, a2 = 0.07922.

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
    blackman_harris4_window : The four term Blackman-Harris window.

    References
    ----------
    .. [1] F. J. Harris, "On the use of windows for harmonic analysis with
           the discrete Fourier transform," Proceedings of the IEEE,
           vol. 66, no. 1, pp. 51-83, 1978.
    """
    return cosine_sum_window(
        "blackman_harris_window",
        n,
        BLACKMAN_HARRIS_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

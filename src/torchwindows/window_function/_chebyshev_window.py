import math
from typing import Optional

import torch
from torch import Tensor

from torchwindows._exceptions import ParamRangeError
from torchwindows.polynomial import chebyshev_polynomial

from ._sampling import DEFAULT_DTYPE, arity_checked, sample_count


@arity_checked
def chebyshev_window(
    n: int,
    at: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Dolph-Chebyshev window function.

    Computes the window whose Fourier transform has all side lobes at the
    same level, ``at`` decibels below the main lobe. The window is
    obtained as the inverse DFT of the Chebyshev polynomial of degree
    n - 1 sampled on a scaled cosine grid. No periodic form is defined.

    Mathematical Definition
    -----------------------
        x0 = cosh(arccosh(10^(at/20)) / (n - 1))
        W[k] = T_{n-1}(x0 * cos(pi k / n)),    k = 0, ..., n-1

    For odd n the window is the real DFT of W; for even n a half-sample
    delay exp(i pi k / n) is applied before the inverse DFT. The result
    is folded about its center and normalized to a peak of 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    at : float
        Side lobe attenuation in decibels. Must be non-negative.
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
        If ``at`` is negative or too large to represent.

    Examples
    --------
    >>> chebyshev_window(8, 10.0)[:2]
    tensor([1.0000, 0.4519], dtype=torch.float64)

    References
    ----------
    .. [1] C. L. Dolph, "A current distribution for broadside arrays which
           optimizes the relationship between beam width and side-lobe
           level," Proceedings of the IRE, vol. 34, no. 6, pp. 335-348, 1946.
    """
    sample_count("chebyshev_window", n)

    at = float(at)

    if not at >= 0:
        raise ParamRangeError(
            f"chebyshev_window: attenuation must be non-negative, got {at}"
        )

    try:
        ripple = 10 ** (at / 20)
    except OverflowError as error:
        raise ParamRangeError(
            f"chebyshev_window: attenuation {at} is out of range"
        ) from error

    if not math.isfinite(ripple):
        raise ParamRangeError(
            f"chebyshev_window: attenuation {at} is out of range"
        )

    if n == 1:
        return torch.ones(1, dtype=dtype or DEFAULT_DTYPE, device=device)

    x0 = math.cosh(math.acosh(ripple) / (n - 1))

    if not math.isfinite(x0):
        raise ParamRangeError(
            f"chebyshev_window: attenuation {at} is out of range"
        )

    k = torch.arange(n, dtype=torch.float64, device=device)

    cw = chebyshev_polynomial(n - 1, x0 * torch.cos(math.pi * k / n))

    if n % 2:
        m = (n - 1) // 2

        re = torch.fft.rfft(cw).real
        re = re / re[0]

        w = torch.cat([torch.flip(re[: m + 1], [0]), re[1 : m + 1]])
    else:
        m = n // 2 - 1

        re = torch.fft.ifft(cw * torch.exp(1j * (math.pi / n) * k)).real
        re = re / re[1]

        w = torch.cat([torch.flip(re[: m + 1], [0]), re[: m + 1]])

    w = w / torch.max(w)

    return w.to(dtype=dtype or DEFAULT_DTYPE)

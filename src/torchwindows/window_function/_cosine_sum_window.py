from typing import Optional, Sequence

import torch
from torch import Tensor

from torchwindows.polynomial import cosine_multiple_to_power

from ._sampling import cosine_power_series, sample_count


def cosine_sum_window(
    name: str,
    n: int,
    coefficients: Sequence[float],
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Harris family window from multiple-angle cosine coefficients.

    Mathematical Definition
    -----------------------
    The symmetric window is

        w[k] = a0 - a1 cos(t_k) + a2 cos(2 t_k) - a3 cos(3 t_k) + ...

    with t_k evenly spaced over [0, 2 pi], both ends included. The
    coefficients are converted to the power-of-cosine basis with
    :func:`cosine_multiple_to_power` and evaluated by Horner's method.

    Parameters
    ----------
    name : str
        Name of the calling window, used in error messages.
    n : int
        Number of points in the output window. Must be positive.
    coefficients : sequence of float
        Between 1 and 7 coefficients a0, a1, ...
    periodic : bool, optional
        If True, return the periodic (DFT-even) window.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.
    """
    sample_count(name, n, periodic)

    power_coefficients = cosine_multiple_to_power(*coefficients)

    return cosine_power_window(
        name,
        n,
        power_coefficients,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )


def cosine_power_window(
    name: str,
    n: int,
    coefficients: Sequence[float],
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Window written directly as c0 + c1 cos(t) + c2 cos(t)^2 + ..."""
    steps = sample_count(name, n, periodic)

    return cosine_power_series(coefficients, steps, dtype, device)[:n]

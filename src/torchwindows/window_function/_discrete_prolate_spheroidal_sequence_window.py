import math
from typing import Callable, Optional, Tuple

import torch
from torch import Tensor

from torchwindows._exceptions import MissingCapabilityError, ParamRangeError

from ._sampling import DEFAULT_DTYPE, arity_checked, sample_count


@arity_checked
def discrete_prolate_spheroidal_sequence_window(
    n: int,
    beta: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    eigh: Optional[Callable[[Tensor], Tuple[Tensor, Tensor]]] = (
        torch.linalg.eigh
    ),
) -> Tensor:
    """
    Discrete prolate spheroidal sequence (DPSS, Slepian) window function.

    The DPSS window maximizes the energy concentration in the main lobe
    for a given bandwidth. It is the eigenvector with the largest
    eigenvalue of the symmetric Toeplitz matrix

        A[i, j] = s[|i - j|],   s[k] = sin(pi b k) / k,   s[0] = b

    where b = beta / (n / 2).

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    beta : float
        Half-bandwidth parameter, in [0, n] (in [0, n + 1] for the
        periodic form).
    periodic : bool, optional
        If True, return the periodic window for spectral analysis.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.
    eigh : callable, optional
        Symmetric eigensolver returning ``(eigenvalues, eigenvectors)``
        with eigenvectors in columns. Default ``torch.linalg.eigh``.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values. The
        symmetric form has unit Euclidean norm. The sign is chosen so
        that the samples sum to a non-negative value.

    Raises
    ------
    MissingCapabilityError
        If ``eigh`` is None.
    ParamRangeError
        If ``beta`` is outside its allowed range.

    Notes
    -----
    The eigenproblem is always solved in float64 and the result is cast
    to ``dtype`` afterwards.
    """
    if eigh is None:
        raise MissingCapabilityError(
            "discrete_prolate_spheroidal_sequence_window: "
            "no symmetric eigensolver available"
        )

    steps = sample_count(
        "discrete_prolate_spheroidal_sequence_window", n, periodic
    )

    beta = float(beta)

    if not 0.0 <= beta <= steps:
        raise ParamRangeError(
            f"discrete_prolate_spheroidal_sequence_window: "
            f"beta must be between 0 and {steps}, got {beta}"
        )

    b = beta / (steps / 2)

    k = torch.arange(steps, dtype=torch.float64, device=device)

    s = torch.empty_like(k)
    s[0] = b
    s[1:] = torch.sin(math.pi * b * k[1:]) / k[1:]

    index = torch.arange(steps, device=device)
    toeplitz = s[torch.abs(index[:, None] - index[None, :])]

    eigenvalues, eigenvectors = eigh(toeplitz)

    w = eigenvectors[:, torch.argmax(eigenvalues)]

    if torch.sum(w) < 0:
        w = -w

    return w[:n].to(dtype=dtype or DEFAULT_DTYPE)

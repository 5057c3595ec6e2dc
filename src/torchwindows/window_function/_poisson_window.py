from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def poisson_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Poisson window function.

    Mathematical Definition
    -----------------------
        w[k] = exp(-alpha * |x_k|)

    where x_k are n points evenly spaced from -1 through 1.
    """
    steps = sample_count("poisson_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return torch.exp(-float(alpha) * torch.abs(x))[:n]

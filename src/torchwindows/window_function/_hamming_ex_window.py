from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

HAMMING_EX_COEFFICIENTS = (0.53836, 0.46164)


@arity_checked
def hamming_ex_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    'Exact' Hamming window function.

    Same form as :func:`hamming_window` with the coefficients
    a0 = 0.53836, a1 = 0.46164, which place a zero exactly on the
    first side lobe.
    """
    return cosine_sum_window(
        "hamming_ex_window",
        n,
        HAMMING_EX_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

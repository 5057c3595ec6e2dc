from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_NUTTALL_COEFFICIENTS = (0.3635819, 0.4891775, 0.1365995, 0.0106411)


@arity_checked
def blackman_nuttall_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Nuttall window function.

    Four term Blackman-Harris family window with coefficients
    a0 = 0.3635819, a1 = 0.4891775, a2 = 0.1365995, a3 = 0.0106411.
    """
    return cosine_sum_window(
        "blackman_nuttall_window",
        n,
        BLACKMAN_NUTTALL_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )

import math
from numbers import Real
from typing import Sequence, Union

import torch
from torch import Tensor

from torchwindows._exceptions import ParamRangeError


def chebyshev_polynomial(
    n: Union[float, Sequence[float], Tensor],
    x: Union[float, Sequence[float], Tensor],
) -> Union[float, Tensor]:
    """
    Evaluate the Chebyshev polynomial of the first kind, T_n(x).

    Mathematical Definition
    -----------------------
    Uses the analytic forms, chosen per element:

        |x| <= 1: T_n(x) = cos(n * arccos(x))
        x > 1:    T_n(x) = cosh(n * arccosh(x))
        x < -1:   T_n(x) = (-1)^n * cosh(n * arccosh(-x))

    Neither branch leaves the domain of its inverse function, so no
    complex intermediate values are needed.

    Parameters
    ----------
    n : float, sequence of float or Tensor
        Degree of the polynomial. May be a sequence or tensor only when
        ``x`` is a scalar.
    x : float, sequence of float or Tensor
        Evaluation point or points.

    Returns
    -------
    float or Tensor
        A float when both ``n`` and ``x`` are scalars, otherwise a tensor
        with the shape of the non-scalar argument.

    Raises
    ------
    ParamRangeError
        If neither ``n`` nor ``x`` is a scalar.

    Examples
    --------
    >>> chebyshev_polynomial(3, 1.0)
    1.0
    >>> chebyshev_polynomial(0, torch.tensor([0.25, 4.0]))
    tensor([1., 1.])
    """
    n_is_scalar = _is_scalar(n)
    x_is_scalar = _is_scalar(x)

    if not n_is_scalar and not x_is_scalar:
        raise ParamRangeError(
            "chebyshev_polynomial: neither n nor x is a scalar"
        )

    if x_is_scalar:
        x = float(x)

        if n_is_scalar:
            return _chebyshev_scalar(float(n), x)

        n = _as_floating_tensor(n)

        if abs(x) <= 1:
            return torch.cos(n * math.acos(x))

        if x > 1:
            return torch.cosh(n * math.acosh(x))

        return torch.cos(math.pi * n) * torch.cosh(n * math.acosh(-x))

    n = float(n)
    x = _as_floating_tensor(x)

    result = torch.zeros_like(x)

    # |x| <= 1: oscillatory region
    mask_middle = torch.abs(x) <= 1
    result[mask_middle] = torch.cos(n * torch.acos(x[mask_middle]))

    # x > 1: exponential growth region
    mask_pos = x > 1
    result[mask_pos] = torch.cosh(n * torch.acosh(x[mask_pos]))

    # x < -1: exponential growth with sign (-1)^n
    mask_neg = x < -1
    result[mask_neg] = math.cos(math.pi * n) * torch.cosh(
        n * torch.acosh(-x[mask_neg])
    )

    return result


def _is_scalar(value) -> bool:
    if isinstance(value, Tensor):
        return value.dim() == 0

    return isinstance(value, Real)


def _as_floating_tensor(value) -> Tensor:
    if not isinstance(value, Tensor):
        value = torch.as_tensor(value, dtype=torch.float64)

    if not value.is_floating_point():
        value = value.to(torch.float64)

    return value


def _chebyshev_scalar(n: float, x: float) -> float:
    if abs(x) <= 1:
        return math.cos(n * math.acos(x))

    if x > 1:
        return math.cosh(n * math.acosh(x))

    return math.cos(math.pi * n) * math.cosh(n * math.acosh(-x))

"""Sampling grids shared by the window functions.

A symmetric window of ``n`` points samples its defining function on a
grid that includes both endpoints. The periodic window of ``n`` points
is the symmetric window of ``n + 1`` points with the last sample dropped,
so every generator builds its grid for ``sample_count(n, periodic)``
points and returns ``samples[:n]``.
"""

import functools
import inspect
import math
from numbers import Integral
from typing import Callable, Optional, Sequence, TypeVar

import torch
from torch import Tensor

from torchwindows._exceptions import ArityError, ParamRangeError

DEFAULT_DTYPE = torch.float64

F = TypeVar("F", bound=Callable[..., Tensor])


def arity_checked(function: F) -> F:
    """Raise ArityError when a generator gets the wrong argument count.

    Only the positional arguments are counted, ``n`` included, so the
    message reads like "hann_window: 1 argument expected. Got 2
    arguments." Keyword-only options are left to the generator.
    """
    names = [
        parameter.name
        for parameter in inspect.signature(function).parameters.values()
        if parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
    ]

    expected = len(names)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        got = len(args) + sum(name in kwargs for name in names[len(args) :])

        if got != expected:
            raise ArityError(
                f"{function.__name__}: {expected} "
                f"argument{'' if expected == 1 else 's'} expected. "
                f"Got {got} arguments."
            )

        return function(*args, **kwargs)

    return wrapper


def sample_count(name: str, n: int, periodic: bool = False) -> int:
    """Validate ``n`` and return the length of the symmetric grid."""
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 1:
        raise ParamRangeError(
            f"{name}: n must be a positive integer, got {n!r}"
        )

    return int(n) + 1 if periodic else int(n)


def linspace(
    start: float,
    end: float,
    steps: int,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    # A single point collapses to ``start``.
    return torch.linspace(
        start, end, steps, dtype=dtype or DEFAULT_DTYPE, device=device
    )


def cosine_power_series(
    coefficients: Sequence[float],
    steps: int,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Evaluate c0 + c1 cos(t) + c2 cos(t)^2 + ... for t over [0, 2 pi].

    Uses Horner's method, so only one cosine is evaluated per sample.
    """
    cx = torch.cos(linspace(0.0, 2 * math.pi, steps, dtype, device))

    result = torch.full_like(cx, coefficients[-1])
    for c in reversed(coefficients[:-1]):
        result = result * cx + c

    return result

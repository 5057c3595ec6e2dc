from numbers import Integral

import torch
from torch import Tensor

from torchwindows._exceptions import ParamRangeError


def frequency_response(window: Tensor, min_bins: int = 1000) -> Tensor:
    """
    Squared magnitude of the window's zero-padded Fourier transform.

    The window is zero-padded to ``fn`` points, where ``fn`` is twice its
    length if that exceeds ``min_bins`` and ``min_bins`` otherwise, and
    transformed with a real FFT. The transform is packed into ``fn``
    values, the real parts of bins 0 through fn/2 followed by the
    imaginary parts of bins 1 through fn/2 - 1. Each half of that packed
    vector is then mirrored about the center so that the zero frequency
    sits in the middle of the returned spectrum.

    Parameters
    ----------
    window : Tensor
        1-D tensor of window samples.
    min_bins : int, optional
        Minimum number of frequency bins. Must be a positive even
        integer. Default 1000.

    Returns
    -------
    Tensor
        A 1-D tensor of size ``fn`` holding real^2 + imag^2.

    Raises
    ------
    ParamRangeError
        If ``min_bins`` is not a positive even integer.
    """
    if (
        isinstance(min_bins, bool)
        or not isinstance(min_bins, Integral)
        or min_bins < 2
        or min_bins % 2
    ):
        raise ParamRangeError(
            f"frequency_response: min_bins must be a positive even "
            f"integer, got {min_bins!r}"
        )

    n = window.numel()
    fn = 2 * n if n > min_bins else int(min_bins)

    spectrum = torch.fft.rfft(window, n=fn)

    packed = torch.cat([spectrum.real, spectrum.imag[1:-1]])

    half = fn // 2

    real = torch.cat([torch.flip(packed[:half], [0]), packed[:half]])
    imag = torch.cat([torch.flip(packed[half:], [0]), packed[half:]])

    return real**2 + imag**2

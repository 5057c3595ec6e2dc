from torch import Tensor


def equivalent_noise_bandwidth(window: Tensor) -> Tensor:
    """
    Equivalent noise bandwidth of a window, in bins.

    Mathematical Definition
    -----------------------
        ENBW = N * sum(w^2) / sum(w)^2

    The value is invariant under scaling of the window. It is 1 for the
    rectangular window and about 1.3629 for the Hamming window.

    Parameters
    ----------
    window : Tensor
        1-D tensor of window samples.

    Returns
    -------
    Tensor
        A 0-d tensor.
    """
    return window.numel() * (window**2).sum() / window.sum() ** 2

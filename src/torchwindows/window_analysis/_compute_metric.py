import logging

from torch import Tensor

from torchwindows._exceptions import UnknownMetricError

from ._coherent_gain import coherent_gain
from ._equivalent_noise_bandwidth import equivalent_noise_bandwidth
from ._frequency_response import frequency_response
from ._processing_gain import processing_gain

logger = logging.getLogger(__name__)

METRICS = {
    "enbw": equivalent_noise_bandwidth,
    "equivalent_noise_bandwidth": equivalent_noise_bandwidth,
    "coherent_gain": coherent_gain,
    "process_gain": processing_gain,
    "processing_gain": processing_gain,
    "modfreqs": frequency_response,
    "frequency_response": frequency_response,
}


def compute_metric(window: Tensor, name: str, **options) -> Tensor:
    """
    Compute a named metric of a window.

    Parameters
    ----------
    window : Tensor
        1-D tensor of window samples.
    name : str
        One of ``enbw``, ``coherent_gain``, ``process_gain`` or
        ``modfreqs``, or the corresponding function name.
    **options
        Passed to the metric. Only ``modfreqs`` takes options
        (``min_bins``).

    Raises
    ------
    UnknownMetricError
        If ``name`` is not a known metric.
    """
    try:
        metric = METRICS[name]
    except KeyError:
        raise UnknownMetricError(
            f"compute_metric: unknown metric {name!r}, expected one of "
            f"{', '.join(sorted(METRICS))}"
        ) from None

    logger.debug("computing %s of a %d-point window", name, window.numel())

    return metric(window, **options)

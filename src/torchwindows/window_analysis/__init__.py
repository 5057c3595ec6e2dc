from ._coherent_gain import coherent_gain
from ._compute_metric import compute_metric
from ._equivalent_noise_bandwidth import equivalent_noise_bandwidth
from ._frequency_response import frequency_response
from ._processing_gain import processing_gain

__all__ = [
    "coherent_gain",
    "compute_metric",
    "equivalent_noise_bandwidth",
    "frequency_response",
    "processing_gain",
]

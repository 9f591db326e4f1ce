# renderer/tone_mapping.py
import numpy as np
from numba import njit


def gamma_correct(linear: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Maps averaged linear radiance to display values: each channel is raised
    to 1/gamma (a square root for the default gamma 2) and clamped to [0, 1].

    Works on any (..., 3) float array and returns a new float64 array.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    flat = linear.reshape(-1)
    out = np.empty_like(flat)
    gamma_kernel(flat, out, 1.0 / gamma)
    return out.reshape(linear.shape)


@njit
def gamma_kernel(linear, output, inv_gamma):
    for i in range(linear.shape[0]):
        v = linear[i]
        # NaN and negative samples carry no light.
        if v != v or v < 0.0:
            v = 0.0
        v = v ** inv_gamma
        if v > 1.0:
            v = 1.0
        output[i] = v

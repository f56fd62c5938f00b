"""Weights of a normalised one-dimensional Gaussian blur kernel."""

from __future__ import annotations

import math
from typing import NamedTuple

MAX_RADIUS = 30
MIN_SIGMA = 0.1


class GaussianKernel(NamedTuple):
    """Normalised weights together with the sigma used to compute them."""

    weights: list[float]
    sigma: float


def kernel_size(radius: int) -> int:
    """Number of weights in a kernel of the given radius."""
    if radius < 0:
        raise ValueError("radius cannot be negative")
    return 1 if radius == 0 else 2 * radius + 1


def gaussian_kernel(radius: int) -> GaussianKernel:
    """Build the kernel for ``radius``; sigma is a third of the radius, at least 0.1."""
    size = kernel_size(radius)
    if radius == 0:
        return GaussianKernel([1.0], MIN_SIGMA)
    sigma = max(MIN_SIGMA, radius / 3.0)
    two_sigma_sq = 2.0 * sigma * sigma
    weights = [math.exp(-(x * x) / two_sigma_sq) for x in range(-radius, radius + 1)]
    total = math.fsum(weights)
    if total != 0.0:
        weights = [w / total for w in weights]
    else:
        weights = [0.0] * size
        weights[radius] = 1.0
    return GaussianKernel(weights, sigma)
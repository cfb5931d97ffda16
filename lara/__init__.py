"""A small clustering, nearest-neighbors and least-squares toolkit."""

import logging

from ._base import Cluster, Supervised
from .cluster import InitAlgorithm, KMeans
from .neighbors import KNearestNeighbors, NeighborWeights
from .regression import LeastSquares, LinearAlgebraError, least_squares

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Cluster",
    "Supervised",
    "InitAlgorithm",
    "KMeans",
    "KNearestNeighbors",
    "NeighborWeights",
    "LeastSquares",
    "LinearAlgebraError",
    "least_squares",
]

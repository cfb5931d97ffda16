from .knn import KNearestNeighbors, NeighborWeights

__all__ = ["KNearestNeighbors", "NeighborWeights"]

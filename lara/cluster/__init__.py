from .kmeans import InitAlgorithm, KMeans

__all__ = ["InitAlgorithm", "KMeans"]

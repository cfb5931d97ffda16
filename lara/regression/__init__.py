from .least_squares import LeastSquares, LinearAlgebraError, least_squares

__all__ = ["LeastSquares", "LinearAlgebraError", "least_squares"]

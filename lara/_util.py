"""Shared helpers for the estimators."""

import logging

import numpy as np
from scipy.spatial.distance import cdist
from sklearn.utils.validation import column_or_1d

logger = logging.getLogger("lara")


def squared_distances(X, Y):
    """Return the pairwise squared Euclidean distances.

    Parameters
    ----------
    X : np.ndarray, ndim=2
        Array with shape (n_samples_X, n_features).

    Y : np.ndarray, ndim=2
        Array with shape (n_samples_Y, n_features).

    Returns
    -------
    np.ndarray
        Array with shape (n_samples_X, n_samples_Y) where entry (i, j) is
        ``sum((X[i] - Y[j]) ** 2)``.
    """
    return cdist(X, Y, metric="sqeuclidean")


def check_labels(y):
    """Validate a label array of non-negative integers.

    Parameters
    ----------
    y : array-like
        1D label array with shape (n_samples,).

    Returns
    -------
    np.ndarray

    Raises
    ------
    ValueError
        If `y` holds non-integer or negative values.
    """
    y = column_or_1d(y)

    if not np.issubdtype(y.dtype, np.integer):
        raise ValueError(f"Labels must be integers but got dtype: {y.dtype}")
    if np.any(y < 0):
        raise ValueError("Labels must be non-negative integers.")

    return y


def check_n_features(X, expected):
    """Raise if `X` does not have `expected` columns."""
    if X.shape[1] != expected:
        raise ValueError(
            f"X has {X.shape[1]} features, but the model expects {expected} features."
        )

"""This module defines the K-nearest neighbors classifier."""

from enum import Enum

import numpy as np
from scipy.stats import mode
from sklearn.metrics import accuracy_score
from sklearn.utils.validation import check_array, check_is_fitted, check_X_y

from .._base import Supervised
from .._util import check_labels, check_n_features, squared_distances


class NeighborWeights(str, Enum):
    """The weighting options for the neighbor votes."""

    UNIFORM = "uniform"


class KNearestNeighbors(Supervised):
    """A K-nearest neighbors classifier implementation.

    Every query sample is compared against every training sample; the
    `n_neighbors` training samples with the smallest squared Euclidean
    distance cast one vote each for their label.

    Parameters
    ----------
    n_neighbors : int, default=5
        A hyperparameter specifing the (positive) number of closest training instances.

    weights : {"uniform"}, default="uniform"
        The weight of each neighbor's vote.

    Notes
    -----
    `n_neighbors` may not exceed the number of training samples; `fit`
    raises a `ValueError` instead of voting among all of them.
    """

    def __init__(self, n_neighbors=5, *, weights=NeighborWeights.UNIFORM):
        self.n_neighbors = n_neighbors
        self.weights = weights

    @classmethod
    def new(cls, k):
        """Construct an unfitted classifier voting among `k` neighbors."""
        return cls(n_neighbors=k)

    def fit(self, X, y):
        """Store the training instances.

        Any previously stored training set is replaced.

        Parameters
        ----------
        X : array-like
            2D feature matrix with shape (n_samples, n_features) of
            numerical values.

        y : array-like
            1D target array with shape (n_samples,) of non-negative
            integers.

        Raises
        ------
        ValueError
            If `X` and `y` differ in length, `y` holds anything but
            non-negative integers, or `n_neighbors` attribute is neither
            an integer nor between one and the feature matrix length
            inclusive.

        Returns
        -------
        KNearestNeighbors
        """
        X, y = check_X_y(X, y, dtype=np.float64, copy=True)
        y = check_labels(y)

        if not (
            isinstance(self.n_neighbors, (int, np.integer))
            and 1 <= self.n_neighbors <= len(X)
        ):
            raise ValueError(
                "`n_neighbors` attribute must be an integer between one and the feature matrix length inclusive."
            )
        if self.weights != NeighborWeights.UNIFORM:
            raise ValueError(f"Unknown neighbor weights: {self.weights!r}")

        self.X_ = X
        self.y_ = y.copy()
        self.classes_ = np.unique(y)

        return self

    def predict(self, X):
        """Assign the majority label of the closest training instances.

        Equally distant training instances are ranked in training order
        and a tied vote goes to the smallest label.

        Parameters
        ----------
        X : array-like
            2D test feature matrix with shape (n_samples, n_features) of
            numerical values.

        Returns
        -------
        np.ndarray
        """
        check_is_fitted(self)
        X = check_array(X, dtype=np.float64, ensure_min_samples=0)
        check_n_features(X, self.X_.shape[1])

        if not len(X):
            return np.empty(0, dtype=self.y_.dtype)

        distances = squared_distances(X, self.X_)
        closest = np.argsort(distances, axis=1, kind="stable")[:, : self.n_neighbors]
        neighbors = mode(self.y_[closest], axis=1, keepdims=False)
        return neighbors.mode

    def score(self, X, y):
        """Evaluate the performance of a K-nearest neighbors classifier.

        The metric used to evaluate the performance of a K-nearest
        neighbors classifier is `sklearn.metrics.accuracy_score`.

        Parameters
        ----------
        X : array-like
            2D test feature matrix with shape (n_samples, n_features) of
            numerical values.

        y : array-like
            1D test target array with shape (n_samples,) of labels.

        Returns
        -------
        float
        """
        check_is_fitted(self)
        X, y = check_X_y(X, y)

        y_pred = self.predict(X)
        return accuracy_score(y, y_pred)

"""This module defines the K-Means clustering estimator."""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np
from sklearn.utils import check_random_state
from sklearn.utils.validation import check_array, check_is_fitted
from tabulate import tabulate

from .._base import Cluster
from .._util import check_n_features, logger, squared_distances


class InitAlgorithm(str, Enum):
    """The initialization options for the centroids."""

    RANDOM = "random"


def _format_centroids(centroids):
    # the "pretty" format skips number parsing, so floats are formatted here
    headers = ["cluster"] + [f"x{i}" for i in range(centroids.shape[1])]
    rows = [[i, *(f"{v:.3f}" for v in centroid)] for i, centroid in enumerate(centroids)]
    return tabulate(rows, headers, tablefmt="pretty")


class KMeans(Cluster):
    """A K-Means clustering estimator.

    Centroids are moved to the mean of their assigned samples until the
    fraction of samples changing cluster between two consecutive
    assignments drops below `tol`, or `max_iter` rounds have run.

    Parameters
    ----------
    n_clusters : int, default=8
        The number of centroids. Capped at the number of training samples.

    max_iter : int, default=300
        The (positive) upper bound on reassignment rounds in `fit`.

    tol : float, default=0.001
        The fraction of reassigned samples under which `fit` stops early.

    init : {"random"} or array-like, default="random"
        The initialization strategy. ``"random"`` picks `n_clusters`
        distinct training samples uniformly at random; an array of shape
        (n_clusters, n_features) is used as the initial centroids and
        may hold no more rows than the training data.

    random_state : int, RandomState instance or None, default=None
        The random source used by the ``"random"`` initialization.

    Attributes
    ----------
    centroids_ : np.ndarray
        2D array with shape (n_centroids, n_features).

    labels_ : np.ndarray
        The cluster label of each training sample after the last round.

    n_iter_ : int
        The number of reassignment rounds run by the last `fit` call.

    converged_ : bool
        Whether the last `fit` call stopped before exhausting `max_iter`.

    Notes
    -----
    A centroid left without samples during a round keeps its position.
    """

    def __init__(
        self,
        n_clusters=8,
        *,
        max_iter=300,
        tol=0.001,
        init=InitAlgorithm.RANDOM,
        random_state=None,
    ):
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.init = init
        self.random_state = random_state

    @classmethod
    def new(cls, X, max_iter, n_clusters, init=InitAlgorithm.RANDOM, *, random_state=None):
        """Construct a K-Means estimator with centroids initialized from `X`.

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        max_iter : int
            The upper bound on reassignment rounds in `fit`.

        n_clusters : int
            The number of requested centroids.

        init : {"random"} or array-like, default="random"
            The initialization strategy.

        random_state : int, RandomState instance or None, default=None
            The random source used by the ``"random"`` initialization.

        Returns
        -------
        KMeans
        """
        kmeans = cls(
            n_clusters,
            max_iter=max_iter,
            init=init,
            random_state=random_state,
        )
        X = check_array(X, dtype=np.float64)
        kmeans._check_params()
        kmeans.centroids_ = kmeans._init_centroids(X)
        return kmeans

    def __str__(self):
        """Return a text-based table of the centroids.

        Returns
        -------
        str
        """
        check_is_fitted(self)

        return _format_centroids(self.centroids_)

    def _check_params(self):
        if not (isinstance(self.n_clusters, (int, np.integer)) and self.n_clusters >= 1):
            raise ValueError("`n_clusters` attribute must be a positive integer.")
        if not (isinstance(self.max_iter, (int, np.integer)) and self.max_iter >= 1):
            raise ValueError("`max_iter` attribute must be a positive integer.")
        if not 0 <= self.tol <= 1:
            raise ValueError("`tol` attribute must be a fraction between zero and one.")

    def _init_centroids(self, X):
        """Return the initial centroids drawn from `X`.

        Parameters
        ----------
        X : np.ndarray
            2D feature array with shape (n_samples, n_features).

        Returns
        -------
        np.ndarray
            2D array with shape (min(n_clusters, n_samples), n_features).
        """
        n_samples = len(X)

        if isinstance(self.init, str):
            if self.init != InitAlgorithm.RANDOM:
                raise ValueError(f"Unknown initialization algorithm: {self.init!r}")

            if self.n_clusters > n_samples:
                logger.warning(
                    "Requested %d clusters but only %d samples; using %d centroids",
                    self.n_clusters,
                    n_samples,
                    n_samples,
                )

            rng = check_random_state(self.random_state)
            indices = rng.choice(
                n_samples, size=min(self.n_clusters, n_samples), replace=False
            )
            return X[indices]

        centroids = check_array(self.init, dtype=np.float64, copy=True)

        if len(centroids) != self.n_clusters:
            raise ValueError(
                f"`init` holds {len(centroids)} centroids but `n_clusters` is {self.n_clusters}."
            )
        if len(centroids) > n_samples:
            raise ValueError(
                f"`init` holds {len(centroids)} centroids but X has only {n_samples} samples."
            )
        check_n_features(X, centroids.shape[1])

        return centroids

    def _assign(self, X, centroids):
        # argmin keeps the first index on ties, i.e. the lowest-index centroid
        return np.argmin(squared_distances(X, centroids), axis=1)

    def fit(self, X, y=None):
        """Train a K-Means estimator.

        Centroids are initialized from `X` unless the estimator already
        holds centroids (e.g., when constructed with `KMeans.new`).

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        y : None
            Ignored.

        Returns
        -------
        KMeans
        """
        X = check_array(X, dtype=np.float64)
        self._check_params()

        if hasattr(self, "centroids_"):
            check_n_features(X, self.centroids_.shape[1])
            centroids = self.centroids_.copy()
        else:
            centroids = self._init_centroids(X)

        n_samples = len(X)
        converged = False

        for n_iter in range(1, self.max_iter + 1):
            labels = self._assign(X, centroids)

            for i in range(len(centroids)):
                members = X[labels == i]
                if len(members):
                    centroids[i] = members.mean(axis=0)
                else:
                    logger.debug("Cluster %d is empty; keeping its centroid", i)

            new_labels = self._assign(X, centroids)
            misses = np.count_nonzero(labels != new_labels) / n_samples

            logger.debug("Round %d reassigned %.4f of the samples", n_iter, misses)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(_format_centroids(centroids))

            if misses < self.tol:
                converged = True
                break

        if converged:
            logger.info("K-Means converged after %d rounds", n_iter)
        else:
            logger.info("K-Means stopped after exhausting %d rounds", n_iter)

        self.centroids_ = centroids
        self.labels_ = new_labels
        self.n_iter_ = n_iter
        self.converged_ = converged

        return self

    def predict(self, X):
        """Return the index of the nearest centroid for each sample.

        Among equally near centroids, the one with the lowest index wins.

        Parameters
        ----------
        X : array-like
            2D test feature array with shape (n_samples, n_features) of
            numerical values.

        Returns
        -------
        np.ndarray
        """
        check_is_fitted(self)
        X = check_array(X, dtype=np.float64, ensure_min_samples=0)
        check_n_features(X, self.centroids_.shape[1])

        return self._assign(X, self.centroids_)

    def get_centroids(self):
        """Return a copy of the centroids.

        Returns
        -------
        np.ndarray
            2D array with shape (n_centroids, n_features).
        """
        check_is_fitted(self)
        return self.centroids_.copy()

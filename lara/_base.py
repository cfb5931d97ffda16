"""This module defines the capability contracts shared by the estimators.

Any estimator deriving from `Cluster` or `Supervised` can be used
interchangeably wherever the contract is expected.
"""

import abc

from sklearn.base import BaseEstimator, ClassifierMixin, ClusterMixin


class Cluster(ClusterMixin, BaseEstimator, metaclass=abc.ABCMeta):
    """An unsupervised estimator that assigns a cluster label to each sample."""

    @abc.abstractmethod
    def fit(self, X, y=None):
        """Fit the estimator on the feature matrix `X`.

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        y : None
            Ignored.

        Returns
        -------
        Cluster
        """

    @abc.abstractmethod
    def predict(self, X):
        """Return the cluster label of each sample in `X`.

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        Returns
        -------
        np.ndarray
            1D array with shape (n_samples,) of non-negative integers.
        """


class Supervised(ClassifierMixin, BaseEstimator, metaclass=abc.ABCMeta):
    """A supervised estimator that predicts a class label for each sample."""

    @abc.abstractmethod
    def fit(self, X, y):
        """Fit the estimator on the feature matrix `X` and labels `y`.

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        y : array-like
            1D target array with shape (n_samples,) of non-negative
            integers.

        Returns
        -------
        Supervised
        """

    @abc.abstractmethod
    def predict(self, X):
        """Return the predicted label of each sample in `X`.

        Parameters
        ----------
        X : array-like
            2D test feature array with shape (n_samples, n_features) of
            numerical values.

        Returns
        -------
        np.ndarray
            1D array with shape (n_samples,) of non-negative integers.
        """

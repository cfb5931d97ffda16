"""This module defines the ordinary least-squares solver."""

import numpy as np
from scipy import linalg
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.metrics import mean_squared_error
from sklearn.utils.validation import check_array, check_is_fitted, check_X_y


class LinearAlgebraError(np.linalg.LinAlgError):
    """Raised when the normal equations cannot be solved."""


def least_squares(X, y):
    """Solve the normal equations ``(X^T X)^-1 X^T y``.

    Parameters
    ----------
    X : array-like
        2D feature array with shape (n_samples, n_features) of numerical
        values.

    y : array-like
        1D target array with shape (n_samples,) or 2D target array with
        shape (n_samples, n_targets) of numerical values.

    Returns
    -------
    np.ndarray
        The coefficients with shape (n_features,) when `y` is 1D,
        otherwise (n_features, n_targets).

    Raises
    ------
    LinearAlgebraError
        If `X` and `y` differ in length or ``X^T X`` is singular.
    """
    X = check_array(X, dtype=np.float64)
    y = check_array(y, dtype=np.float64, ensure_2d=False)

    if len(X) != len(y):
        raise LinearAlgebraError(
            f"X has {len(X)} samples but y has {len(y)} samples."
        )

    xtx = X.T @ X

    # inv only fails on exact zero pivots, so check the rank explicitly
    rank = np.linalg.matrix_rank(xtx)
    if rank < xtx.shape[0]:
        raise LinearAlgebraError(f"X^T X is singular (rank {rank} < {xtx.shape[0]}).")

    try:
        xtx_inv = linalg.inv(xtx)
    except (linalg.LinAlgError, ValueError) as exc:
        raise LinearAlgebraError(str(exc)) from exc

    return xtx_inv @ (X.T @ y)


class LeastSquares(RegressorMixin, BaseEstimator):
    """An ordinary least-squares linear regressor.

    Attributes
    ----------
    coef_ : np.ndarray
        The fitted coefficients, see `least_squares`.
    """

    def fit(self, X, y):
        """Solve for the coefficients.

        Parameters
        ----------
        X : array-like
            2D feature array with shape (n_samples, n_features) of
            numerical values.

        y : array-like
            1D or 2D target array with n_samples rows of numerical values.

        Returns
        -------
        LeastSquares
        """
        self.coef_ = least_squares(X, y)
        return self

    def predict(self, X):
        """Return the fitted linear combination of the features.

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

        return X @ self.coef_

    def score(self, X, y):
        """Evaluate the performance of a least-squares regressor.

        The metric used to evaluate the performance of a least-squares
        regressor is `sklearn.metrics.mean_squared_error`.

        Parameters
        ----------
        X : array-like
            2D test feature array with shape (n_samples, n_features) of
            numerical values.

        y : array-like
            1D or 2D test target array with n_samples rows of numerical
            values.

        Returns
        -------
        float
        """
        check_is_fitted(self)
        X, y = check_X_y(X, y, y_numeric=True, multi_output=True)

        y_pred = self.predict(X)
        return mean_squared_error(y, y_pred)

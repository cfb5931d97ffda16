#!/usr/bin/env python3
# pylint: skip-file

import sys
import unittest

import numpy as np
import pandas as pd
from sklearn.base import clone
from sklearn.datasets import load_iris
from sklearn.exceptions import NotFittedError

sys.path.append("..")

from lara import KNearestNeighbors, NeighborWeights, Supervised


def generate_data(features: dict) -> tuple:
    data = pd.DataFrame(features)
    return data.iloc[:, :-1], data.iloc[:, -1]


class TestKNearestNeighbors(unittest.TestCase):
    def test_new(self):
        clf = KNearestNeighbors.new(3)
        self.assertEqual(clf.n_neighbors, 3)
        self.assertEqual(clf.weights, NeighborWeights.UNIFORM)
        self.assertIsInstance(clf, Supervised)

    def test_predict_majority_vote(self):
        X, y = generate_data({"A": [0, 1, 2, 10, 11], "y": [0, 0, 1, 1, 1]})
        clf = KNearestNeighbors(n_neighbors=3).fit(X, y)
        np.testing.assert_array_equal(clf.predict([[0.5], [10.5]]), [0, 1])

    def test_predict_tied_vote_goes_to_smallest_label(self):
        clf = KNearestNeighbors(n_neighbors=2).fit([[0.0], [2.0]], [3, 1])
        np.testing.assert_array_equal(clf.predict([[1.0]]), [1])

    def test_predict_equal_distances_rank_in_training_order(self):
        clf = KNearestNeighbors(n_neighbors=1).fit([[0.0], [2.0]], [3, 1])
        np.testing.assert_array_equal(clf.predict([[1.0]]), [3])

    def test_predict_shape_and_labels(self):
        iris = load_iris()
        X, y = iris.data[:, :3], iris.target
        clf = KNearestNeighbors(n_neighbors=3).fit(X, y)

        y_pred = clf.predict(X[::7])
        self.assertEqual(y_pred.shape, (len(X[::7]),))
        self.assertTrue(set(y_pred) <= set(y))
        self.assertGreater(clf.score(X, y), 0.9)

    def test_fit_replaces_training_set(self):
        clf = KNearestNeighbors(n_neighbors=1).fit([[0.0], [1.0]], [0, 0])
        clf.fit([[0.0], [1.0], [2.0]], [5, 5, 5])
        self.assertEqual(len(clf.X_), 3)
        np.testing.assert_array_equal(clf.classes_, [5])
        np.testing.assert_array_equal(clf.predict([[0.0]]), [5])

    def test_fit_copies_data(self):
        X, y = np.array([[0.0], [1.0]]), np.array([0, 1])
        clf = KNearestNeighbors(n_neighbors=1).fit(X, y)
        X[:] = 100.0
        y[:] = 7
        np.testing.assert_array_equal(clf.predict([[0.1], [0.9]]), [0, 1])

    def test_check_valid_params(self):
        X, y = [[0.0], [1.0], [2.0]], [0, 1, 1]
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=0).fit(X, y)
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=4).fit(X, y)
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=1.5).fit(X, y)
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=1, weights="distance").fit(X, y)

    def test_check_valid_labels(self):
        X = [[0.0], [1.0], [2.0]]
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=1).fit(X, [0, -1, 1])
        with self.assertRaises(ValueError):
            KNearestNeighbors(n_neighbors=1).fit(X, [0.5, 1.0, 1.0])

    def test_fit_mismatch_keeps_state(self):
        clf = KNearestNeighbors(n_neighbors=1).fit([[0.0], [1.0]], [0, 1])
        with self.assertRaises(ValueError):
            clf.fit([[0.0], [1.0], [2.0]], [0, 1])
        self.assertEqual(len(clf.X_), 2)
        np.testing.assert_array_equal(clf.y_, [0, 1])

    def test_predict_not_fitted(self):
        with self.assertRaises(NotFittedError):
            KNearestNeighbors().predict([[0.0]])

    def test_predict_feature_mismatch(self):
        clf = KNearestNeighbors(n_neighbors=1).fit([[0.0], [1.0]], [0, 1])
        with self.assertRaises(ValueError):
            clf.predict([[0.0, 1.0]])

    def test_predict_no_rows(self):
        clf = KNearestNeighbors(n_neighbors=1).fit([[0.0], [1.0]], [0, 1])
        self.assertEqual(clf.predict(np.empty((0, 1))).shape, (0,))

    def test_clone(self):
        clf = clone(KNearestNeighbors(n_neighbors=4))
        self.assertEqual(clf.get_params()["n_neighbors"], 4)


if __name__ == "__main__":
    unittest.main(verbosity=2)

from timeit import timeit

from sklearn.datasets import load_iris
from tabulate import tabulate

from lara import KMeans, KNearestNeighbors

iris = load_iris()
X, y = iris.data[:, :3], iris.target

N_RUNS = 100


def kmeans_fit():
    KMeans.new(X, 100, 2, random_state=0).fit(X)


kmeans = KMeans.new(X, 100, 2, random_state=0).fit(X)
knn = KNearestNeighbors(n_neighbors=3).fit(X, y)

benches = {
    "kmeans fit": kmeans_fit,
    "kmeans predict": lambda: kmeans.predict(X),
    "knn fit": lambda: knn.fit(X, y),
    "knn predict": lambda: knn.predict(X),
}

rows = [
    [name, f"{timeit(fn, number=N_RUNS) / N_RUNS * 1000:.4f}"] for name, fn in benches.items()
]
print(tabulate(rows, ["benchmark", "time (ms)"], tablefmt="pretty"))

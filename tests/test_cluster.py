import numpy as np
import pytest

from cluster import ClusteringError, assign_clusters, compute_wss, train_kmeans
from config import LIKERT_COLS
from preprocess import clean_data, standardize_likert


@pytest.fixture
def X(raw_survey):
    df, _ = standardize_likert(clean_data(raw_survey))
    return df[LIKERT_COLS].to_numpy()


def test_compute_wss_covers_k_range(X):
    wss = compute_wss(X, k_range=range(1, 6), n_init=5)
    assert list(wss["k"]) == [1, 2, 3, 4, 5]
    # k=1 inertia is total sum of squares of standardized data
    assert wss["wss"].iloc[0] == pytest.approx(X.shape[0] * X.shape[1])
    assert wss["wss"].is_monotonic_decreasing


def test_compute_wss_skips_k_above_row_count():
    X = np.array([[0.0, 1.0], [1.0, 0.0], [2.0, 2.0]])
    wss = compute_wss(X, k_range=range(1, 6), n_init=2)
    assert list(wss["k"]) == [1, 2, 3]


def test_labels_are_one_based(X):
    _, labels = train_kmeans(X, k=4)
    assert set(labels) == {1, 2, 3, 4}


def test_same_seed_gives_same_labels(X):
    _, first = train_kmeans(X, k=4, n_init=25, seed=123)
    _, second = train_kmeans(X, k=4, n_init=25, seed=123)
    np.testing.assert_array_equal(first, second)


def test_fit_failure_raises_clustering_error():
    X = np.array([[0.0, 1.0], [1.0, 0.0]])
    with pytest.raises(ClusteringError) as exc:
        train_kmeans(X, k=4)
    assert exc.value.__cause__ is not None


def test_assign_clusters_adds_categorical(raw_survey, X):
    df = clean_data(raw_survey)
    _, labels = train_kmeans(X, k=4)
    out = assign_clusters(df, labels)
    assert "cluster" not in df.columns
    assert list(out["cluster"].cat.categories) == [1, 2, 3, 4]
    assert out["cluster"].cat.ordered

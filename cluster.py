# 3. cluster.py

import pandas as pd
from sklearn.cluster import KMeans

from config import N_CLUSTERS, N_INIT, SEED, K_RANGE, CLUSTER_COL


class ClusteringError(RuntimeError):
    pass


def compute_wss(X, k_range=K_RANGE, n_init=N_INIT, seed=SEED):
    """
    Total within-cluster sum of squares for each candidate k (elbow method).

    k is picked by looking at the curve; nothing here chooses it.
    """
    n_samples = len(X)
    rows = []
    for k in k_range:
        if k > n_samples:
            print(f"[WARN] Skipping k={k}: only {n_samples} respondents")
            continue
        model = KMeans(n_clusters=k, n_init=n_init, random_state=seed)
        model.fit(X)
        rows.append({"k": k, "wss": model.inertia_})
        print(f"[INFO] k={k} wss={model.inertia_:.2f}")
    return pd.DataFrame(rows, columns=["k", "wss"])


def train_kmeans(X, k=N_CLUSTERS, n_init=N_INIT, seed=SEED):
    """
    Fit k-means and return the model with 1-based labels.

    Raises:
        ClusteringError: if the fit fails for any reason.
    """
    try:
        model = KMeans(n_clusters=k, n_init=n_init, random_state=seed)
        labels = model.fit_predict(X) + 1
    except Exception as e:
        print(f"[ERROR] Error in kmeans: {e}")
        raise ClusteringError("Clustering failed. Please check your data and code.") from e

    print(f"[INFO] k{k} clustering completed successfully.")
    return model, labels


def assign_clusters(df, labels, cluster_col=CLUSTER_COL):
    df = df.copy()
    levels = sorted(set(int(label) for label in labels))
    df[cluster_col] = pd.Categorical(labels, categories=levels, ordered=True)
    return df

# 5. validate.py

import numpy as np
import pandas as pd
from sklearn.metrics import pairwise_distances, silhouette_samples


def silhouette_analysis(X, labels):
    """
    Per-respondent silhouette widths from a full pairwise distance matrix.

    Parameters:
        X (np.ndarray): Standardized attribute matrix.
        labels (np.ndarray): Cluster label per row.

    Returns:
        pd.DataFrame: Columns [cluster, neighbor, sil_width], one row per respondent.
    """
    X = np.asarray(X, dtype=float)
    labels = np.asarray(labels)
    dist = pairwise_distances(X, metric="euclidean")
    widths = silhouette_samples(dist, labels, metric="precomputed")

    # nearest other cluster by mean distance
    clusters = np.unique(labels)
    mean_dist = np.column_stack([dist[:, labels == c].mean(axis=1) for c in clusters])
    mean_dist[labels[:, None] == clusters[None, :]] = np.inf
    neighbor = clusters[mean_dist.argmin(axis=1)]

    return pd.DataFrame({"cluster": labels, "neighbor": neighbor, "sil_width": widths})


def silhouette_summary(sil):
    per_cluster = sil.groupby("cluster")["sil_width"].agg(size="size", avg_width="mean").reset_index()
    avg = sil["sil_width"].mean()
    print(f"[INFO] Average silhouette width: {avg:.4f}")
    print(per_cluster.to_string(index=False))
    return per_cluster, avg

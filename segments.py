# 4. segments.py

import pandas as pd

from config import LIKERT_COLS, CLUSTER_COL, COUNT_COL


def cluster_counts(df, cluster_col=CLUSTER_COL):
    counts = df[cluster_col].value_counts(sort=False).sort_index()
    counts = counts[counts > 0]
    print("[INFO] Cluster counts:")
    print(counts.to_string())
    return counts


def summarize_clusters(df, likert_cols=LIKERT_COLS, cluster_col=CLUSTER_COL, count_col=COUNT_COL):
    """
    Mean of each Likert attribute and member count per cluster.

    Only clusters with at least one member get a row.

    Parameters:
        df (pd.DataFrame): Standardized data with a cluster column.
        likert_cols (list): Attribute columns to average.

    Returns:
        pd.DataFrame: Columns [cluster, *likert_cols, count], one row per cluster.
    """
    grouped = df.groupby(cluster_col, observed=True)
    summary = grouped[likert_cols].mean()
    summary[count_col] = grouped.size()
    summary = summary.reset_index()
    summary[cluster_col] = summary[cluster_col].astype(int)

    print("[INFO] Cluster Summary:")
    print(summary.to_string(index=False))
    return summary


def summary_to_long(summary, cluster_col=CLUSTER_COL, count_col=COUNT_COL):
    attributes = [c for c in summary.columns if c not in (cluster_col, count_col)]
    return pd.melt(
        summary.drop(columns=[count_col]),
        id_vars=[cluster_col],
        value_vars=attributes,
        var_name="attribute",
        value_name="mean_rating",
    )

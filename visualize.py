# 6. visualize.py

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from config import CLUSTER_COL
from segments import summary_to_long


def _finish(save_path):
    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=300)
        print(f"[INFO] Plot saved to: {save_path}")
        plt.close()
    else:
        plt.show()


def plot_elbow(wss_df, save_path=None):
    """
    Plot total within-cluster sum of squares against k.

    Parameters:
        wss_df (pd.DataFrame): Output of compute_wss with columns 'k' and 'wss'.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    plt.figure(figsize=(8, 5))
    plt.plot(wss_df["k"], wss_df["wss"], marker="o")
    plt.xticks(wss_df["k"])
    plt.title("Elbow Method: Optimal Number of Clusters")
    plt.xlabel("Number of Clusters (k)")
    plt.ylabel("Total Within Sum of Squares")
    _finish(save_path)


def plot_silhouette(sil, save_path=None):
    """
    Silhouette plot: one band per cluster, widths sorted within each band.

    Parameters:
        sil (pd.DataFrame): Output of silhouette_analysis.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    clusters = sorted(sil["cluster"].unique())
    palette = sns.color_palette("Set2", len(clusters))
    avg = sil["sil_width"].mean()

    plt.figure(figsize=(8, 6))
    y_lower = 0
    for color, c in zip(palette, clusters):
        widths = np.sort(sil.loc[sil["cluster"] == c, "sil_width"].to_numpy())
        y_upper = y_lower + len(widths)
        plt.fill_betweenx(np.arange(y_lower, y_upper), 0, widths, color=color, alpha=0.8)
        plt.text(-0.05, y_lower + len(widths) / 2, str(c), ha="right", va="center")
        y_lower = y_upper + 5

    plt.axvline(avg, color="red", linestyle="--", label=f"Average width: {avg:.2f}")
    plt.title(f"Silhouette Plot for {len(clusters)} Clusters")
    plt.xlabel("Silhouette width")
    plt.ylabel("Cluster")
    plt.yticks([])
    plt.xlim(min(-0.1, sil["sil_width"].min() - 0.05), 1)
    plt.legend(loc="lower right")
    _finish(save_path)


def plot_cluster_distribution(df, cluster_col=CLUSTER_COL, save_path=None):
    plt.figure(figsize=(7, 5))
    sns.countplot(x=cluster_col, data=df, color="steelblue")
    plt.title("Cluster Distribution")
    plt.xlabel("Cluster")
    plt.ylabel("Count")
    _finish(save_path)


def plot_attribute_means(summary, cluster_col=CLUSTER_COL, save_path=None):
    """
    Grouped horizontal bar chart of mean attribute rating by cluster.

    Parameters:
        summary (pd.DataFrame): Output of summarize_clusters.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    long_summary = summary_to_long(summary, cluster_col=cluster_col)
    long_summary[cluster_col] = long_summary[cluster_col].astype(str)

    plt.figure(figsize=(9, 6))
    sns.barplot(
        x="mean_rating", y="attribute", hue=cluster_col,
        data=long_summary, palette="Set2", orient="h",
    )
    plt.title("Average Attribute Ratings by Cluster")
    plt.xlabel("Mean Rating")
    plt.ylabel("Smartwatch Attribute")
    plt.legend(title="Cluster")
    _finish(save_path)

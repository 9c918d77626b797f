# 8. app.py

import os
import sys

from config import DATA_FILE, OUTPUT_FILE, LIKERT_COLS, N_CLUSTERS, N_INIT, SEED, K_RANGE
from load_data import load_data
from preprocess import clean_data, standardize_likert
from cluster import compute_wss, train_kmeans, assign_clusters
from segments import cluster_counts, summarize_clusters
from validate import silhouette_analysis, silhouette_summary
from visualize import plot_elbow, plot_silhouette, plot_cluster_distribution, plot_attribute_means
from report import save_cluster_summary


def run_pipeline(filepath=DATA_FILE, output_path=OUTPUT_FILE, k=N_CLUSTERS,
                 n_init=N_INIT, seed=SEED, k_range=K_RANGE, show_plots=True, plot_dir=None):
    df = load_data(filepath)
    if df is None:
        sys.exit("[ERROR] Data loading failed. Exiting.")

    df_clean = clean_data(df, LIKERT_COLS)
    df_std, scaler = standardize_likert(df_clean, LIKERT_COLS)
    X = df_std[LIKERT_COLS].to_numpy()

    wss = compute_wss(X, k_range=k_range, n_init=n_init, seed=seed)

    model, labels = train_kmeans(X, k=k, n_init=n_init, seed=seed)
    df_std = assign_clusters(df_std, labels)

    cluster_counts(df_std)
    summary = summarize_clusters(df_std, LIKERT_COLS)

    sil = silhouette_analysis(X, labels)
    silhouette_summary(sil)

    if show_plots or plot_dir:
        if plot_dir:
            os.makedirs(plot_dir, exist_ok=True)

        def target(name):
            return os.path.join(plot_dir, name) if plot_dir else None

        plot_elbow(wss, save_path=target("elbow.png"))
        plot_silhouette(sil, save_path=target("silhouette.png"))
        plot_cluster_distribution(df_std, save_path=target("cluster_distribution.png"))
        plot_attribute_means(summary, save_path=target("attribute_means.png"))

    save_cluster_summary(summary, output_path)

    return {
        "data": df_std,
        "scaler": scaler,
        "wss": wss,
        "model": model,
        "labels": labels,
        "summary": summary,
        "silhouette": sil,
    }


def main():
    run_pipeline()


if __name__ == "__main__":
    main()

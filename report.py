# 7. report.py

from config import OUTPUT_FILE


def save_cluster_summary(summary, output_path=OUTPUT_FILE):
    """
    Write the cluster summary table to CSV, overwriting any existing file.

    Parameters:
        summary (pd.DataFrame): Output of summarize_clusters, or None.
        output_path (str): File path to save the table. Default is 'cluster_summary.csv'.

    Returns:
        bool: True if the file was written.
    """
    if summary is None:
        print("[ERROR] 'cluster_summary' not found.")
        return False

    summary.to_csv(output_path, index=False)
    print(f"[INFO] Cluster summary saved to: {output_path}")
    return True

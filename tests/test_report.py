import pandas as pd

from report import save_cluster_summary


def test_save_overwrites_existing_file(tmp_path):
    path = tmp_path / "cluster_summary.csv"
    path.write_text("stale")
    summary = pd.DataFrame({"cluster": [1, 2], "style": [0.5, -0.5], "count": [3, 4]})

    assert save_cluster_summary(summary, str(path))
    pd.testing.assert_frame_equal(pd.read_csv(path), summary)


def test_missing_summary_is_not_written(tmp_path):
    path = tmp_path / "cluster_summary.csv"
    assert not save_cluster_summary(None, str(path))
    assert not path.exists()

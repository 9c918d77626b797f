import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

RAW_LIKERT = ["ConstCom", "TimelyInf", "TaskMgm", "DeviceSt", "Wellness", "Athlete", "Style"]


@pytest.fixture
def raw_survey():
    """Survey frame with the spreadsheet's original headers and four planted segments."""
    rng = np.random.default_rng(7)
    centers = np.array([
        [6, 6, 6, 2, 2, 2, 2],
        [2, 2, 2, 6, 6, 2, 2],
        [2, 2, 2, 2, 2, 6, 6],
        [4, 4, 4, 4, 4, 4, 4],
    ])
    rows = []
    for center in centers:
        for _ in range(30):
            rows.append(np.clip(np.rint(center + rng.normal(0, 0.5, size=7)), 1, 7))
    ratings = np.array(rows)
    n = len(ratings)

    df = pd.DataFrame(ratings, columns=RAW_LIKERT)
    df["AmznP"] = rng.integers(0, 2, size=n)
    df["Female"] = rng.integers(0, 2, size=n)
    df["Degree"] = rng.integers(0, 2, size=n)
    df["Income"] = rng.integers(1, 6, size=n)
    df["Age"] = rng.integers(18, 70, size=n)
    return df


@pytest.fixture
def raw_survey_with_gaps(raw_survey):
    df = raw_survey.copy()
    df.loc[0, "Wellness"] = np.nan
    df.loc[5, "Age"] = np.nan
    df.loc[9, "Income"] = np.nan
    return df

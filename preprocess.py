# 2. preprocess.py

import re

import pandas as pd
from sklearn.preprocessing import StandardScaler

from config import LIKERT_COLS, CATEGORICAL_COLS, ORDINAL_COLS, NUMERIC_COLS


class MissingColumnsError(ValueError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "The following columns are missing in the dataset: " + ", ".join(self.missing)
        )


def _snake_case(name):
    s = str(name).strip()
    s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", s)
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s)
    s = re.sub(r"[^0-9a-zA-Z]+", "_", s).strip("_").lower()
    if not s:
        s = "x"
    if s[0].isdigit():
        s = "x" + s
    return s


def clean_names(df):
    """
    Normalize column names to snake_case.

    'AmznP' -> 'amzn_p', 'Timely Inf' -> 'timely_inf', '1st Choice' -> 'x1st_choice'.
    Duplicate names after cleaning get a numeric suffix (_2, _3, ...).
    """
    seen = {}
    names = []
    for col in df.columns:
        name = _snake_case(col)
        if name in seen:
            seen[name] += 1
            name = f"{name}_{seen[name]}"
        else:
            seen[name] = 1
        names.append(name)

    df = df.copy()
    df.columns = names
    print(f"[INFO] Data columns: {names}")
    return df


def check_required_columns(df, required=LIKERT_COLS):
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise MissingColumnsError(missing)


def coerce_types(df, likert_cols=LIKERT_COLS, categorical_cols=CATEGORICAL_COLS,
                 ordinal_cols=ORDINAL_COLS, numeric_cols=NUMERIC_COLS):
    df = df.copy()
    absent = [c for c in categorical_cols + ordinal_cols + numeric_cols if c not in df.columns]
    if absent:
        print(f"[WARN] Skipping type coercion for absent columns: {absent}")

    for col in categorical_cols:
        if col in df.columns:
            df[col] = df[col].astype("category")

    for col in ordinal_cols:
        if col in df.columns:
            levels = sorted(df[col].dropna().unique())
            df[col] = pd.Categorical(df[col], categories=levels, ordered=True)

    for col in numeric_cols + list(likert_cols):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    return df


def clean_data(df, likert_cols=LIKERT_COLS):
    """
    Clean raw survey data.

    Parameters:
        df (pd.DataFrame): Raw survey responses as loaded from the spreadsheet.
        likert_cols (list): Likert-scale columns that must be present.

    Returns:
        pd.DataFrame: Typed data with no missing values in any retained row.
    """
    df = clean_names(df)
    check_required_columns(df, likert_cols)
    df = coerce_types(df, likert_cols=likert_cols)

    n_before = len(df)
    df = df.dropna().reset_index(drop=True)
    print(f"[INFO] Dropped {n_before - len(df)} rows with missing values, {len(df)} remain")
    return df


def standardize_likert(df, likert_cols=LIKERT_COLS):
    scaler = StandardScaler()
    df = df.copy()
    df[likert_cols] = scaler.fit_transform(df[likert_cols])
    print("[INFO] Likert-scale columns have been standardized.")
    return df, scaler

# 1. load_data.py

import os

import pandas as pd

from config import DATA_FILE


def load_data(filepath=DATA_FILE):
    try:
        ext = os.path.splitext(filepath)[1].lower()
        if ext in (".xlsx", ".xls"):
            df = pd.read_excel(filepath)
        else:
            df = pd.read_csv(filepath, encoding="ISO-8859-1")
        print(f"[INFO] Loaded data with shape: {df.shape}")
        return df
    except FileNotFoundError:
        print(f"[ERROR] File not found: {filepath}. Please check the path.")
        return None

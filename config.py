# 0. config.py

DATA_FILE = "SmartWatch Data File.xlsx"
OUTPUT_FILE = "cluster_summary.csv"

# Column names after clean_names()
LIKERT_COLS = ["const_com", "timely_inf", "task_mgm", "device_st", "wellness", "athlete", "style"]
CATEGORICAL_COLS = ["amzn_p", "female", "degree"]
ORDINAL_COLS = ["income"]
NUMERIC_COLS = ["age"]

# Clustering
N_CLUSTERS = 4
N_INIT = 25
SEED = 123
K_RANGE = range(1, 11)

CLUSTER_COL = "cluster"
COUNT_COL = "count"

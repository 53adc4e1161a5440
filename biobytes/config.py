# config.py
# defaults & thresholds
#

# percent bounds (inclusive)
PERCENT_MIN = 0
PERCENT_MAX = 100

# common quality thresholds
Q_LOW = 10        # 90% accuracy
Q_MEDIUM = 20     # 99% accuracy
Q_HIGH = 30       # 99.9% accuracy
Q_EXCELLENT = 40  # 99.99% accuracy

# encoding assumed when none is given (Illumina 1.8+)
DEFAULT_QUALITY_ENCODING = "PHRED33"

# read filtering defaults
DEFAULT_CUTOFF_SCORE = Q_MEDIUM
DEFAULT_CUTOFF_PERCENT = 90

# src/corp_finance/constants.py
"""
Model Constants

Day-count basis, iteration counts and diagnostic thresholds shared by
the three-statement engine.
"""

DAYS_IN_YEAR = 365.0

# Rounds of the interest <-> debt <-> cash fixed point before the final pass
CIRCULAR_ITERATIONS = 5

# Newton rounds for the n-th root behind revenue CAGR
CAGR_ITERATIONS = 30
CAGR_FLOOR = 0.001

# Accounting identities are checked to the nearest cent
BALANCE_TOLERANCE = 0.01

LEVERAGE_WARNING = 6.0
COVERAGE_WARNING = 2.0

METHODOLOGY = "Linked Three-Statement Model with Circular Reference Resolution"
PRECISION = "float64"

"""
Statistical self-checks for the splitting generator.

Chi-square uniformity audits for fair/biased rolls and shuffles, plus the
reference call-sequence scenario used by `main.py --mode scenario`.
"""

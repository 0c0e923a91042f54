# minilang/api/__init__.py
"""
Tabular API for checking many sources at once.

Results come back as pandas DataFrames so large suites of programs can be
filtered and summarized with the usual DataFrame tooling.
"""

from .batch import recognize_batch, recognize_frame, results_frame, RESULT_COLUMNS

__all__ = ['recognize_batch', 'recognize_frame', 'results_frame', 'RESULT_COLUMNS']

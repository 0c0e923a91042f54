# minilang/api/batch.py

from typing import Any, Dict, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from minilang.parser.config import ParserConfig
from minilang.parser.recognizer import RecognitionResult, check_source
from minilang.utils.logging_config import get_logger, PerformanceTimer

logger = get_logger(__name__)

RESULT_COLUMNS = ['accepted', 'verdict', 'error_type', 'error', 'token_count', 'warning_count']


def _result_row(source: str, result: RecognitionResult) -> Dict[str, Any]:
    return {
        'source': source,
        'accepted': result.ok,
        'error_type': type(result.error).__name__ if result.error is not None else None,
        'error': result.error.message if result.error is not None else None,
        'token_count': len(result.tokens),
        'warning_count': len(result.warnings),
    }


def results_frame(sources: Sequence[str], results: Sequence[RecognitionResult]) -> pd.DataFrame:
    """Tabulate already computed results, one row per source."""
    rows = [_result_row(source, result) for source, result in zip(sources, results)]

    df = pd.DataFrame(rows, columns=['source', 'accepted', 'error_type', 'error',
                                     'token_count', 'warning_count'])
    df['accepted'] = df['accepted'].astype(bool)
    df['token_count'] = df['token_count'].astype('int64')
    df['warning_count'] = df['warning_count'].astype('int64')
    df.insert(2, 'verdict', np.where(df['accepted'], 'accepted', 'rejected'))
    # keep missing errors as None rather than NaN
    df['error_type'] = df['error_type'].astype(object)
    df['error'] = df['error'].astype(object)
    return df


def recognize_batch(sources: Iterable[str], config: Optional[ParserConfig] = None) -> pd.DataFrame:
    """
    Check many independent sources and tabulate the verdicts.

    Every source is scanned and recognized on its own; nothing is shared
    between rows.

    Args:
        sources: Source texts to check
        config: Recognizer configuration applied to every source

    Returns:
        DataFrame with one row per source and the columns
        ``source`` plus RESULT_COLUMNS
    """
    sources = list(sources)

    with PerformanceTimer(f"recognize_batch({len(sources)} sources)"):
        results = [check_source(source, config) for source in sources]

    df = results_frame(sources, results)
    logger.info("Batch checked %d sources, %d accepted", len(df), int(df['accepted'].sum()))
    return df


def recognize_frame(df: pd.DataFrame, column: str = 'source',
                    config: Optional[ParserConfig] = None) -> pd.DataFrame:
    """
    Return a copy of ``df`` with the verdict columns for ``df[column]`` appended.

    Missing cells (None/NaN) are not checked: they get the verdict
    ``"missing"``, ``accepted=False`` and no error.
    """
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in DataFrame")

    present = df[column].notna().to_numpy()
    results = recognize_batch(df.loc[present, column].astype(str).tolist(), config)

    out = df.copy()
    out['accepted'] = False
    out['verdict'] = 'missing'
    out['error_type'] = None
    out['error'] = None
    out['token_count'] = 0
    out['warning_count'] = 0
    for col in RESULT_COLUMNS:
        out.loc[present, col] = results[col].to_numpy()

    if not present.all():
        logger.info("Skipped %d missing sources in column '%s'", int((~present).sum()), column)
    return out

"""
Tables Module
=============

This module provides functions for collecting topology statistics
and walk experiment summaries into tables.
"""

import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..metrics.topology import GRAPH_STATS_COLUMNS

logger = logging.getLogger(__name__)


def stats_table(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Build a table of ``graph_stats`` results.

    Parameters
    ----------
    rows : List[Dict[str, Any]]
        One ``graph_stats`` dict per graph; extra keys (e.g. 'mode',
        'trial') are kept as leading columns

    Returns
    -------
    pd.DataFrame
        One row per graph
    """
    df = pd.DataFrame(rows)
    extra = [c for c in df.columns if c not in GRAPH_STATS_COLUMNS]
    ordered = extra + [c for c in GRAPH_STATS_COLUMNS if c in df.columns]
    return df[ordered]


def walk_pdf_table(pdfs_by_trial: List[Dict[str, np.ndarray]]) -> pd.DataFrame:
    """
    Lay out bucketed walk PDFs side by side, three columns per trial.

    Parameters
    ----------
    pdfs_by_trial : List[Dict[str, np.ndarray]]
        Output of ``walk_distribution_pdfs`` for each trial

    Returns
    -------
    pd.DataFrame
        One row per bucket
    """
    columns = {}
    for trial, pdfs in enumerate(pdfs_by_trial):
        columns[f"Reference_{trial}"] = pdfs["reference"]
        columns[f"Uniform_{trial}"] = pdfs["uniform"]
        columns[f"Weighted_{trial}"] = pdfs["weighted"]
    return pd.DataFrame(columns)


def results_to_markdown(
    df: pd.DataFrame,
    float_format: str = "%.3f",
) -> str:
    """
    Convert DataFrame to Markdown table format.

    Parameters
    ----------
    df : pd.DataFrame
        Input DataFrame
    float_format : str, optional
        Format string for floats

    Returns
    -------
    str
        Markdown table
    """
    df_formatted = df.copy()
    for col in df_formatted.select_dtypes(include=[np.floating]).columns:
        df_formatted[col] = df_formatted[col].apply(lambda x: float_format % x if not np.isnan(x) else "N/A")

    return df_formatted.to_markdown(index=False)

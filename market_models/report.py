"""Tabular views of an evolution grid for inspection and export."""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd
from custom_types.types import ArrayLike, as_index_array
from market_models.evolution import GridDescriptor

log = logging.getLogger(__name__)


def steps_frame(grid: GridDescriptor, numeraires: Optional[ArrayLike] = None) -> pd.DataFrame:
    """
    One row per evolution step.

    Columns: evolution_time, first_alive_rate, relevance_lo, relevance_hi and,
    when numeraires are given, numeraire and numeraire_time (its maturity).
    """
    lo, hi = zip(*grid.relevance_rates)
    df = pd.DataFrame({
        'evolution_time': grid.evolution_times,
        'first_alive_rate': grid.first_alive_rate,
        'relevance_lo': lo,
        'relevance_hi': hi,
    })
    df.index.name = 'step'

    if numeraires is not None:
        numeraires = as_index_array(numeraires)
        if len(numeraires) != grid.number_of_steps:
            raise ValueError(
                f"Size mismatch between numeraires ({len(numeraires)}) "
                f"and evolution times ({grid.number_of_steps})"
            )
        df['numeraire'] = numeraires
        df['numeraire_time'] = grid.rate_times[numeraires]

    return df


def rates_frame(grid: GridDescriptor) -> pd.DataFrame:
    """One row per rate: accrual start, end and tau"""
    df = pd.DataFrame({
        'start': grid.rate_times[:-1],
        'end': grid.rate_times[1:],
        'tau': grid.rate_taus,
    })
    df.index.name = 'rate'
    return df


def effective_stop_frame(grid: GridDescriptor) -> pd.DataFrame:
    """Effective stop times, steps as rows and rate indices as columns"""
    df = pd.DataFrame(grid.effective_stop_time)
    df.index.name = 'step'
    return df


class GridExporter:
    """Export the tables of an evolution grid"""

    def __init__(self, grid: GridDescriptor, numeraires: Optional[ArrayLike] = None):
        self.grid = grid
        self.numeraires = numeraires

    def to_csv(self, output_dir: str, prefix: str = 'grid') -> list[Path]:
        """Write steps, rates and effective stop time tables as CSV files"""
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)

        tables = {
            'steps': steps_frame(self.grid, self.numeraires),
            'rates': rates_frame(self.grid),
            'effective_stop_time': effective_stop_frame(self.grid),
        }

        paths = []
        for name, df in tables.items():
            path = out / f"{prefix}_{name}.csv"
            df.to_csv(path)
            paths.append(path)
            log.info("Exported %d rows to %s", len(df), path)

        return paths

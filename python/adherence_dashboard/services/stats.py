"""
Dashboard statistics for the Patient Adherence Dashboard

Summary figures are always computed over the whole store, never over a
search or filter result.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from services.models import Patient
from utils.helpers import format_percentage, get_adherence_tier

logger = logging.getLogger(__name__)

ADHERENCE_TIERS = ["High", "Medium", "Low"]

@dataclass
class DashboardStats:
    total: int
    avg_adherence: float
    missed_doses: float
    need_attention: int

    def summary_lines(self) -> List[str]:
        """The four summary strings shown on the dashboard"""
        if self.total == 0:
            return [
                "Total Patients: 0",
                "Avg Adherence: 0%",
                "Missed Doses: 0%",
                "Need Attention: 0",
            ]

        return [
            f"Total Patients: {self.total}",
            f"Avg Adherence: {format_percentage(self.avg_adherence)}",
            f"Missed Doses: {format_percentage(self.missed_doses)}",
            f"Need Attention: {self.need_attention}",
        ]

def patients_to_frame(patients: Iterable[Patient]) -> pd.DataFrame:
    """Tabular view of patient records"""
    rows = [
        {
            'name': p.name,
            'id': p.id,
            'condition': p.condition,
            'adherence': p.adherence,
            'need_attention': p.need_attention,
            'date_added': p.date_added,
        }
        for p in patients
    ]
    return pd.DataFrame(rows, columns=['name', 'id', 'condition', 'adherence', 'need_attention', 'date_added'])

def compute_stats(patients: Iterable[Patient]) -> DashboardStats:
    """
    Compute dashboard statistics

    Args:
        patients: Every record in the store

    Returns:
        Total, mean adherence (0 when empty), missed doses (100 - mean)
        and the number of records flagged for attention
    """
    df = patients_to_frame(patients)

    if df.empty:
        return DashboardStats(total=0, avg_adherence=0.0, missed_doses=0.0, need_attention=0)

    avg = float(pd.to_numeric(df['adherence']).mean())
    return DashboardStats(
        total=len(df),
        avg_adherence=avg,
        missed_doses=100 - avg,
        need_attention=int(df['need_attention'].astype(bool).sum()),
    )

def adherence_breakdown(patients: Iterable[Patient]) -> pd.DataFrame:
    """Patient counts per adherence tier, in High/Medium/Low order"""
    df = patients_to_frame(patients)
    tiers = df['adherence'].map(get_adherence_tier) if not df.empty else pd.Series(dtype=str)
    counts = tiers.value_counts().reindex(ADHERENCE_TIERS, fill_value=0)
    return pd.DataFrame({'Tier': ADHERENCE_TIERS, 'Patients': counts.astype(int).tolist()})

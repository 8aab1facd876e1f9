"""Database models."""
from finplan.models.report import Report

__all__ = [
    "Report",
]

"""
Analytics package exports.
"""

from review_engine.analytics.service import analyze_performance
from review_engine.analytics.types import PerformanceReport

__all__ = [
    "analyze_performance",
    "PerformanceReport",
]

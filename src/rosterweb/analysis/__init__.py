"""Analysis modules."""

from rosterweb.analysis.analyzer import analyze_network, analyze_records
from rosterweb.analysis.models import DEFAULT_CONFIG, AnalysisConfig, NetworkReport

__all__ = [
    "DEFAULT_CONFIG",
    "AnalysisConfig",
    "NetworkReport",
    "analyze_network",
    "analyze_records",
]

"""Heuristic predictive analytics over accumulated meetings and action items."""

from meetingforge.forecast.engine import (
    PredictiveAnalyticsEngine,
    calculate_prediction_confidence,
)

__all__ = ["PredictiveAnalyticsEngine", "calculate_prediction_confidence"]

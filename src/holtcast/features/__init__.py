"""src/holtcast/features/__init__.py"""

from .frequency import DAILY, MONTHLY, UNKNOWN, WEEKLY, FrequencyClassification, detect_frequency

__all__ = ["FrequencyClassification", "detect_frequency", "DAILY", "WEEKLY", "MONTHLY", "UNKNOWN"]

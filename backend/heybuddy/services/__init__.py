from .schedule import build_schedule, classify_priority

__all__ = ["build_schedule", "classify_priority"]

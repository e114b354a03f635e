"""
Contract Validation Module

JSON Schema снимков ExponentialChange и GrowthOrDecayRatios,
построенные из самих моделей.
"""

from .snapshots import snapshot_errors, snapshot_validator, validate_snapshot

__all__ = [
    "snapshot_errors",
    "snapshot_validator",
    "validate_snapshot",
]

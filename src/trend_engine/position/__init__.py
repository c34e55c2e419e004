"""
Position tracking: single-unit ledger and position states.
"""

from .models import DEFAULT_STARTING_CAPITAL, PositionLedger, PositionState

__all__ = [
    'DEFAULT_STARTING_CAPITAL',
    'PositionLedger',
    'PositionState',
]

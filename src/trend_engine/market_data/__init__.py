"""
Market data: snapshot models and synthetic feeds.
"""

from .models import PriceLevel, Snapshot
from .feeds import (
    FEEDS,
    FeedGenerator,
    generate_feed,
    noisy_triangle_wave,
    rand01,
    triangle_wave,
)

__all__ = [
    'PriceLevel',
    'Snapshot',
    'FEEDS',
    'FeedGenerator',
    'generate_feed',
    'noisy_triangle_wave',
    'rand01',
    'triangle_wave',
]

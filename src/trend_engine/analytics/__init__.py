"""
Analytics - order book metrics consumed by the decision engine.
"""

from .order_book import IMBALANCE_EPSILON, imbalance, mid_price

__all__ = [
    'IMBALANCE_EPSILON',
    'imbalance',
    'mid_price',
]

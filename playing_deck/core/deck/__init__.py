"""
扑克牌组模块.

提供Suit、Rank枚举以及Card和Deck类，实现牌组构建、排序、洗牌和过滤.
"""

from .types import (
    Suit, Rank, STANDARD_SUITS, MIN_RANK, MAX_RANK,
    STANDARD_DECK_SIZE, TYPICAL_DECK_SIZE,
)
from .card import Card, absolute_rank
from .deck import Deck, Comparator

__all__ = [
    'Suit', 'Rank', 'STANDARD_SUITS', 'MIN_RANK', 'MAX_RANK',
    'STANDARD_DECK_SIZE', 'TYPICAL_DECK_SIZE',
    'Card', 'absolute_rank', 'Deck', 'Comparator',
]

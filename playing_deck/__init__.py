"""
扑克牌组库
构建一副或多副标准牌（可含王牌），提供排序、洗牌和按花色/点数过滤
"""

import logging

from .core import (
    Suit, Rank, STANDARD_SUITS, MIN_RANK, MAX_RANK,
    STANDARD_DECK_SIZE, TYPICAL_DECK_SIZE,
    Card, absolute_rank, Deck, Comparator,
    DeckConfig, LoggingConfig,
    DeckError, InvalidArgumentError, DeckConfigError,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Suit', 'Rank', 'STANDARD_SUITS', 'MIN_RANK', 'MAX_RANK',
    'STANDARD_DECK_SIZE', 'TYPICAL_DECK_SIZE',
    'Card', 'absolute_rank', 'Deck', 'Comparator',
    'DeckConfig', 'LoggingConfig',
    'DeckError', 'InvalidArgumentError', 'DeckConfigError',
]

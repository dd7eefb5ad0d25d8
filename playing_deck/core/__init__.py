"""
核心模块
包含牌组、配置和异常等基础组件
"""

from .deck import (
    Suit, Rank, STANDARD_SUITS, MIN_RANK, MAX_RANK,
    STANDARD_DECK_SIZE, TYPICAL_DECK_SIZE,
    Card, absolute_rank, Deck, Comparator,
)
from .config import DeckConfig, LoggingConfig
from .exceptions import DeckError, InvalidArgumentError, DeckConfigError

__all__ = [
    # 牌组相关
    'Suit', 'Rank', 'STANDARD_SUITS', 'MIN_RANK', 'MAX_RANK',
    'STANDARD_DECK_SIZE', 'TYPICAL_DECK_SIZE',
    'Card', 'absolute_rank', 'Deck', 'Comparator',

    # 配置相关
    'DeckConfig', 'LoggingConfig',

    # 异常类型
    'DeckError', 'InvalidArgumentError', 'DeckConfigError',
]

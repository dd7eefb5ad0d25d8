"""
扑克牌组相关类型定义.

定义扑克牌的花色、点数等基础枚举类型，以及牌组尺寸常量.
显示名称使用显式映射表，不依赖枚举成员名.
"""

from enum import IntEnum
from typing import Dict, List, Tuple


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值即花色在标准轮换中的位置，用于计算绝对排名.
    JOKER 是哨兵花色，不属于四种标准花色.
    """

    SPADE = 0       # 黑桃
    DIAMOND = 1     # 方块
    CLUB = 2        # 梅花
    HEART = 3       # 红桃
    JOKER = 4       # 王牌

    @property
    def display_name(self) -> str:
        """返回花色的单数显示名称，如"Spade"."""
        return _SUIT_NAMES[self]

    @property
    def is_standard(self) -> bool:
        """检查是否为四种标准花色之一."""
        return self is not Suit.JOKER

    def __str__(self) -> str:
        return self.display_name


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    ACE 为 1，KING 为 13，数值顺序即点数顺序.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def display_name(self) -> str:
        """返回点数的显示名称，如"Ace"."""
        return _RANK_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_SUIT_NAMES: Dict[Suit, str] = {
    Suit.SPADE: "Spade",
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.HEART: "Heart",
    Suit.JOKER: "Joker",
}

_RANK_NAMES: Dict[Rank, str] = {
    Rank.ACE: "Ace", Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
    Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven", Rank.EIGHT: "Eight",
    Rank.NINE: "Nine", Rank.TEN: "Ten", Rank.JACK: "Jack", Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

# 标准轮换顺序: 黑桃、方块、梅花、红桃
STANDARD_SUITS: Tuple[Suit, ...] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)

MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING

STANDARD_DECK_SIZE = len(STANDARD_SUITS) * int(MAX_RANK)

# 52张标准牌 + 2张王牌，用于预估容量
TYPICAL_DECK_SIZE = 54


def get_standard_suits() -> List[Suit]:
    """
    获取四种标准花色.

    Returns:
        List[Suit]: 按标准轮换顺序排列的花色列表
    """
    return list(STANDARD_SUITS)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从 ACE 到 KING 的13种点数
    """
    return list(Rank)


def suit_from_name(name: str) -> Suit:
    """
    按显示名称查找花色，接受单数或复数形式，忽略大小写.

    Raises:
        KeyError: 名称无法识别时
    """
    key = name.strip().lower()
    for suit, suit_name in _SUIT_NAMES.items():
        lowered = suit_name.lower()
        if key == lowered or key == lowered + "s":
            return suit
    raise KeyError(name)


def rank_from_name(name: str) -> Rank:
    """按显示名称查找点数，忽略大小写."""
    key = name.strip().lower()
    for rank, rank_name in _RANK_NAMES.items():
        if key == rank_name.lower():
            return rank
    raise KeyError(name)

"""
扑克牌数据结构.

定义不可变的Card类和用于默认排序的绝对排名函数.
"""

from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidArgumentError
from .types import Suit, Rank, MAX_RANK, STANDARD_SUITS, rank_from_name, suit_from_name

JOKER_DISPLAY = "Joker"

# 王牌的绝对排名从所有标准牌之后开始
_JOKER_BASE = len(STANDARD_SUITS) * int(MAX_RANK) + 1


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性和哈希基于花色和点数.
    标准花色的点数必须是Rank；王牌的点数是非负整数序号，用于区分同一副牌中的多张王牌.

    Attributes:
        suit: 花色
        rank: 点数（王牌为序号）

    Examples:
        >>> str(Card(Suit.HEART, Rank.ACE))
        'Ace of Hearts'
        >>> str(Card(Suit.JOKER, 1))
        'Joker'
    """

    suit: Suit
    rank: Union[Rank, int]

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
            InvalidArgumentError: 当王牌序号为负数时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")

        if self.suit is Suit.JOKER:
            if isinstance(self.rank, bool) or not isinstance(self.rank, int):
                raise TypeError(f"joker index must be an int, got {type(self.rank).__name__}")
            if self.rank < 0:
                raise InvalidArgumentError(f"joker index must be non-negative, got {self.rank}")
            # 统一存为普通整数，使 Card(JOKER, Rank.ACE) == Card(JOKER, 1)
            object.__setattr__(self, "rank", int(self.rank))
        elif not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")

    @property
    def is_joker(self) -> bool:
        """检查是否为王牌."""
        return self.suit is Suit.JOKER

    @property
    def absolute_rank(self) -> int:
        """返回默认排序使用的绝对排名，见 absolute_rank()."""
        return absolute_rank(self)

    def __str__(self) -> str:
        """
        返回扑克牌的显示字符串.

        Returns:
            str: 标准牌为"点数 of 花色s"，如"Two of Spades"；王牌一律为"Joker"
        """
        if self.is_joker:
            return JOKER_DISPLAY
        return f"{self.rank.display_name} of {self.suit.display_name}s"

    def __repr__(self) -> str:
        if self.is_joker:
            return f"Card(JOKER, {self.rank})"
        return f"Card({self.suit.name}, {self.rank.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从显示字符串创建扑克牌对象.

        Args:
            card_str: 如"Ace of Hearts"；"Joker"解析为序号0的王牌

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            InvalidArgumentError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card string must be a str, got {type(card_str).__name__}")

        text = card_str.strip()
        if text.lower() == JOKER_DISPLAY.lower():
            return cls(Suit.JOKER, 0)

        parts = text.split()
        if len(parts) != 3 or parts[1].lower() != "of":
            raise InvalidArgumentError(f"cannot parse card string: {card_str!r}")

        try:
            rank = rank_from_name(parts[0])
            suit = suit_from_name(parts[2])
        except KeyError as e:
            raise InvalidArgumentError(f"cannot parse card string {card_str!r}: unknown name {e}") from e

        if suit is Suit.JOKER:
            raise InvalidArgumentError(f"cannot parse card string: {card_str!r}")
        return cls(suit, rank)


def absolute_rank(card: Card) -> int:
    """
    计算扑克牌的绝对排名，作为默认比较的全序键.

    标准牌为 花色位置 * 13 + 点数，黑桃A最小(1)，红桃K最大(52).
    王牌固定排在所有标准牌之后: 53 + 序号.

    Args:
        card: 扑克牌

    Returns:
        int: 绝对排名
    """
    if card.is_joker:
        return _JOKER_BASE + card.rank
    return int(card.suit) * int(MAX_RANK) + int(card.rank)

"""
扑克牌组管理.

定义Deck类: 构建一副或多副标准牌（可含王牌），并提供排序、洗牌和按花色/点数过滤.
"""

import logging
import random
from functools import cmp_to_key
from typing import TYPE_CHECKING, Callable, Collection, Iterable, Iterator, List, Optional, Union

from ..exceptions import InvalidArgumentError
from .card import Card, absolute_rank
from .types import Suit, Rank, get_all_ranks, get_standard_suits

if TYPE_CHECKING:
    from ..config import DeckConfig

logger = logging.getLogger(__name__)

# 基于牌组位置的小于谓词: (i, j) -> bool
Comparator = Callable[[int, int], bool]


def _validate_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


class Deck:
    """
    表示一个有序、可变的扑克牌序列.

    可以由一副或多副标准牌构成，允许重复的牌.
    使用可选的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck.build(1, 2)
        >>> len(deck)
        54
        >>> deck.shuffle()
        >>> deck.sort()
        >>> str(deck[0])
        'Ace of Spades'
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始的牌，为None时创建空牌组
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器

        Raises:
            TypeError: 当cards中包含非Card对象时
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = list(cards) if cards is not None else []
        for card in self._cards:
            if not isinstance(card, Card):
                raise TypeError(f"deck can only hold Card objects, got {type(card).__name__}")

    @classmethod
    def build(cls, num_decks: int = 1, num_jokers_per_deck: int = 0,
              rng: Optional[random.Random] = None) -> 'Deck':
        """
        构建由若干副标准牌组成的牌组.

        每副牌依次为黑桃、方块、梅花、红桃，各花色内点数从A到K，
        之后是num_jokers_per_deck张序号为0..n-1的王牌.

        Args:
            num_decks: 标准牌副数
            num_jokers_per_deck: 每副牌的王牌数
            rng: 随机数生成器

        Returns:
            Deck: 共 num_decks * (52 + num_jokers_per_deck) 张牌的新牌组

        Raises:
            TypeError: 当数量不是整数时
            InvalidArgumentError: 当数量为负数时
        """
        _validate_count("num_decks", num_decks)
        _validate_count("num_jokers_per_deck", num_jokers_per_deck)

        single = [Card(suit, rank) for suit in get_standard_suits() for rank in get_all_ranks()]
        single.extend(Card(Suit.JOKER, index) for index in range(num_jokers_per_deck))

        deck = cls(rng=rng)
        for _ in range(num_decks):
            deck._cards.extend(single)

        logger.debug("built deck: %d decks, %d jokers per deck, %d cards",
                     num_decks, num_jokers_per_deck, len(deck._cards))
        return deck

    @classmethod
    def from_config(cls, config: "DeckConfig") -> 'Deck':
        """按DeckConfig构建牌组，随机数生成器由config.seed决定."""
        return cls.build(config.num_decks, config.num_jokers_per_deck, rng=config.make_rng())

    def less(self) -> Comparator:
        """
        返回升序比较谓词.

        谓词按位置比较牌组中两张牌的绝对排名，黑桃A最小，王牌最大.

        Returns:
            Comparator: (i, j) -> self[i] 的绝对排名 < self[j] 的绝对排名
        """
        def _less(i: int, j: int) -> bool:
            return absolute_rank(self._cards[i]) < absolute_rank(self._cards[j])
        return _less

    def greater(self) -> Comparator:
        """返回降序比较谓词，与less()相反."""
        def _greater(i: int, j: int) -> bool:
            return absolute_rank(self._cards[i]) > absolute_rank(self._cards[j])
        return _greater

    def sort(self, comparator: Optional[Comparator] = None) -> None:
        """
        原地排序，不保证稳定.

        Args:
            comparator: 基于位置的小于谓词，为None时使用less()

        Raises:
            InvalidArgumentError: 当comparator不可调用时
        """
        if comparator is None:
            comparator = self.less()
        elif not callable(comparator):
            raise InvalidArgumentError(f"comparator must be callable, got {type(comparator).__name__}")

        def _compare(i: int, j: int) -> int:
            if comparator(i, j):
                return -1
            if comparator(j, i):
                return 1
            return 0

        # 谓词读取的是当前位置上的牌，所以先对下标排序，再整体重排
        order = sorted(range(len(self._cards)), key=cmp_to_key(_compare))
        self._cards[:] = [self._cards[i] for i in order]
        logger.debug("sorted %d cards", len(self._cards))

    def shuffle(self) -> None:
        """
        洗牌.

        使用Fisher-Yates洗牌算法随机打乱牌的顺序.
        """
        self._rng.shuffle(self._cards)
        logger.debug("shuffled %d cards", len(self._cards))

    def filter(self, excluded_suits: Collection[Suit] = (),
               excluded_ranks: Collection[Union[Rank, int]] = ()) -> 'Deck':
        """
        过滤掉指定花色或点数的牌.

        花色在excluded_suits中或点数在excluded_ranks中的牌都会被去掉，
        其余牌保持原有相对顺序. 原牌组不变.

        Args:
            excluded_suits: 要排除的花色，为空时不按花色排除
            excluded_ranks: 要排除的点数，为空时不按点数排除

        Returns:
            Deck: 新的牌组，共享原牌组的随机数生成器
        """
        suit_set = set(excluded_suits)
        rank_set = set(excluded_ranks)

        kept = [card for card in self._cards
                if card.suit not in suit_set and card.rank not in rank_set]

        logger.debug("filtered deck: kept %d of %d cards", len(kept), len(self._cards))
        return type(self)(kept, rng=self._rng)

    def clear(self) -> None:
        """清空牌组."""
        self._cards.clear()

    @property
    def cards(self) -> List[Card]:
        """返回牌的副本列表."""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        """
        检查牌组是否为空.

        Returns:
            bool: 如果牌组为空则返回True
        """
        return len(self._cards) == 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __getitem__(self, index: Union[int, slice]) -> Union[Card, "Deck"]:
        if isinstance(index, slice):
            return type(self)(self._cards[index], rng=self._rng)
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        """两个牌组包含相同顺序的相同牌时相等."""
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)})"

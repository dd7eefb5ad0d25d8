"""
Card类的单元测试.

覆盖显示字符串、相等性、王牌序号验证、解析和绝对排名.
"""

import pytest

from playing_deck import Card, Suit, Rank, InvalidArgumentError, absolute_rank


@pytest.mark.unit
@pytest.mark.fast
class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        card = Card(Suit.HEART, Rank.ACE)
        assert card.suit == Suit.HEART
        assert card.rank == Rank.ACE
        assert not card.is_joker

    def test_card_immutability(self):
        """测试Card对象的不可变性."""
        card = Card(Suit.SPADE, Rank.KING)
        with pytest.raises(AttributeError):
            card.suit = Suit.HEART
        with pytest.raises(AttributeError):
            card.rank = Rank.ACE

    def test_card_string_representation(self):
        test_cases = [
            (Card(Suit.HEART, Rank.ACE), "Ace of Hearts"),
            (Card(Suit.SPADE, Rank.TWO), "Two of Spades"),
            (Card(Suit.DIAMOND, Rank.NINE), "Nine of Diamonds"),
            (Card(Suit.CLUB, Rank.JACK), "Jack of Clubs"),
        ]
        for card, expected in test_cases:
            assert str(card) == expected

    def test_joker_string_ignores_rank(self):
        for index in (0, 1, 7, 13):
            assert str(Card(Suit.JOKER, index)) == "Joker"

    def test_repr(self):
        assert repr(Card(Suit.CLUB, Rank.TEN)) == "Card(CLUB, TEN)"
        assert repr(Card(Suit.JOKER, 2)) == "Card(JOKER, 2)"

    def test_structural_equality_and_hash(self):
        card1 = Card(Suit.HEART, Rank.ACE)
        card2 = Card(Suit.HEART, Rank.ACE)
        card3 = Card(Suit.SPADE, Rank.ACE)

        assert card1 == card2
        assert hash(card1) == hash(card2)
        assert card1 != card3
        assert len({card1, card2, card3}) == 2

    def test_joker_index_normalized_to_int(self):
        """王牌序号统一存为整数."""
        joker = Card(Suit.JOKER, Rank.ACE)
        assert type(joker.rank) is int
        assert joker == Card(Suit.JOKER, 1)
        assert Card(Suit.JOKER, 0) != Card(Suit.JOKER, 1)

    def test_card_validation(self):
        with pytest.raises(TypeError):
            Card("Heart", Rank.ACE)
        with pytest.raises(TypeError):
            Card(Suit.HEART, 1)
        with pytest.raises(TypeError):
            Card(Suit.HEART, "Ace")
        with pytest.raises(TypeError):
            Card(Suit.JOKER, "0")
        with pytest.raises(TypeError):
            Card(Suit.JOKER, True)

    def test_negative_joker_index(self):
        with pytest.raises(InvalidArgumentError):
            Card(Suit.JOKER, -1)
        with pytest.raises(ValueError):
            Card(Suit.JOKER, -5)


@pytest.mark.unit
@pytest.mark.fast
class TestCardFromStr:
    """Card.from_str解析测试."""

    def test_parse_display_strings(self):
        test_cases = [
            ("Ace of Hearts", Card(Suit.HEART, Rank.ACE)),
            ("Two of Spades", Card(Suit.SPADE, Rank.TWO)),
            ("queen of diamonds", Card(Suit.DIAMOND, Rank.QUEEN)),
            ("  King of Club ", Card(Suit.CLUB, Rank.KING)),
        ]
        for card_str, expected in test_cases:
            assert Card.from_str(card_str) == expected

    def test_parse_joker(self):
        assert Card.from_str("Joker") == Card(Suit.JOKER, 0)
        assert Card.from_str("joker").is_joker

    def test_str_round_trip_for_standard_cards(self):
        card = Card(Suit.DIAMOND, Rank.SEVEN)
        assert Card.from_str(str(card)) == card

    @pytest.mark.parametrize("card_str", [
        "", "Ace", "Ace Hearts", "Ace of", "Eleven of Hearts",
        "Ace of Swords", "Ace of Jokers", "Ace in Hearts",
    ])
    def test_parse_invalid(self, card_str):
        with pytest.raises(InvalidArgumentError):
            Card.from_str(card_str)

    def test_parse_non_string(self):
        with pytest.raises(TypeError):
            Card.from_str(14)


@pytest.mark.unit
@pytest.mark.fast
class TestAbsoluteRank:
    """绝对排名测试."""

    def test_standard_cards(self):
        assert absolute_rank(Card(Suit.SPADE, Rank.ACE)) == 1
        assert absolute_rank(Card(Suit.SPADE, Rank.KING)) == 13
        assert absolute_rank(Card(Suit.DIAMOND, Rank.ACE)) == 14
        assert absolute_rank(Card(Suit.CLUB, Rank.FIVE)) == 31
        assert absolute_rank(Card(Suit.HEART, Rank.KING)) == 52

    def test_jokers_rank_above_standard_cards(self):
        assert absolute_rank(Card(Suit.JOKER, 0)) == 53
        assert absolute_rank(Card(Suit.JOKER, 1)) == 54
        assert Card(Suit.JOKER, 0).absolute_rank > Card(Suit.HEART, Rank.KING).absolute_rank

    def test_property_matches_function(self):
        card = Card(Suit.HEART, Rank.TEN)
        assert card.absolute_rank == absolute_rank(card)

"""Tests for Rank, Suit, and Card."""

import pytest

from blackjack.cards import (
    Card,
    Rank,
    Suit,
    all_cards,
    all_ranks,
    all_suits,
    card_name,
    rank_name,
)


class TestRank:
    """Tests for the Rank enum."""

    def test_ranks_ascending(self):
        """Test ranks enumerate Ace low to King high."""
        ranks = all_ranks()
        assert len(ranks) == 13
        assert ranks[0] == Rank.ACE
        assert ranks[1] == Rank.TWO
        assert ranks[9] == Rank.TEN
        assert ranks[-3:] == [Rank.JACK, Rank.QUEEN, Rank.KING]

    def test_base_values(self):
        """Test fixed point values."""
        assert Rank.ACE.base_value == 1
        assert Rank.SEVEN.base_value == 7
        assert Rank.TEN.base_value == 10
        assert Rank.JACK.base_value == 10
        assert Rank.QUEEN.base_value == 10
        assert Rank.KING.base_value == 10

    def test_rank_names(self):
        """Test human-readable rank names."""
        assert rank_name(Rank.ACE) == "Ace"
        assert rank_name(Rank.SEVEN) == "7"
        assert rank_name(Rank.TEN) == "10"
        assert rank_name(Rank.KING) == "King"

    def test_rank_kinds(self):
        assert Rank.ACE.is_ace
        assert not Rank.ACE.is_numeric
        assert Rank.TWO.is_numeric
        assert Rank.QUEEN.is_face
        assert not Rank.TEN.is_face


class TestSuit:
    """Tests for the Suit enum."""

    def test_suit_order(self):
        assert all_suits() == [Suit.SPADES, Suit.CLUBS, Suit.HEARTS, Suit.DIAMONDS]

    def test_suit_str(self):
        assert str(Suit.SPADES) == "♠"
        assert Suit.HEARTS.display_name == "Hearts"


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Suit.SPADES, Rank.ACE)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Suit.SPADES, Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_equality_and_hash(self):
        """Test value equality."""
        assert Card(Suit.SPADES, Rank.ACE) == Card(Suit.SPADES, Rank.ACE)
        assert Card(Suit.SPADES, Rank.ACE) != Card(Suit.HEARTS, Rank.ACE)
        assert len({Card(Suit.SPADES, Rank.ACE), Card(Suit.SPADES, Rank.ACE)}) == 1

    def test_card_name(self):
        """Test suit name followed by rank name."""
        card = Card(Suit.SPADES, Rank.ACE)
        assert card_name(card) == "Spades Ace"
        assert Card(Suit.DIAMONDS, Rank.NINE).name == "Diamonds 9"

    def test_card_str(self):
        assert str(Card(Suit.SPADES, Rank.ACE)) == "A♠"
        assert str(Card(Suit.HEARTS, Rank.TEN)) == "10♥"

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Suit.SPADES, Rank.ACE)
        assert Card.from_string("2h") == Card(Suit.HEARTS, Rank.TWO)
        assert Card.from_string("10D") == Card(Suit.DIAMONDS, Rank.TEN)
        assert Card.from_string("K♣") == Card(Suit.CLUBS, Rank.KING)

    @pytest.mark.parametrize("code", ["", "A", "ZS", "AX", "11H"])
    def test_card_from_string_invalid(self, code):
        with pytest.raises(ValueError):
            Card.from_string(code)


def test_all_cards_is_full_set():
    """Test the 52-card Cartesian product."""
    cards = all_cards()
    assert len(cards) == 52
    assert len(set(cards)) == 52
    assert cards[0] == Card(Suit.SPADES, Rank.ACE)
    assert cards[-1] == Card(Suit.DIAMONDS, Rank.KING)

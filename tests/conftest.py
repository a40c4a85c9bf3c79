"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from blackjack.cards import Card, Rank, Suit
from blackjack.deck import Deck
from blackjack.hand import Hand, ScoringPolicy
from blackjack.game import BlackjackGame


def make_hand(*codes: str, scoring: ScoringPolicy = ScoringPolicy.ACE_AWARE) -> Hand:
    """Build a hand from short card codes like 'AS', '10H'."""
    hand = Hand(scoring=scoring)
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def stacked_deck(*codes: str) -> Deck:
    """Build a deck that deals the given cards in order."""
    return Deck.stacked([Card.from_string(code) for code in codes])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def ace_king_hand():
    """Ace and King."""
    hand = Hand()
    hand.add_card(Card(Suit.SPADES, Rank.ACE))
    hand.add_card(Card(Suit.HEARTS, Rank.KING))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


@pytest.fixture
def stacked_game():
    """Factory for games dealt from a fixed card order.

    Deal order is player, player, dealer up, dealer down, then hits.
    """

    def _make(*codes: str, scoring: ScoringPolicy = ScoringPolicy.ACE_AWARE) -> BlackjackGame:
        return BlackjackGame(scoring=scoring, deck=stacked_deck(*codes))

    return _make

"""Console blackjack - UI-agnostic engine plus a terminal front end."""

from blackjack.cards import Card, Rank, Suit
from blackjack.deck import Deck, generate_deck
from blackjack.hand import DealerHand, Hand, ScoringPolicy
from blackjack.rules import DealerAction, GameResult

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "generate_deck",
    "DealerHand",
    "Hand",
    "ScoringPolicy",
    "DealerAction",
    "GameResult",
]

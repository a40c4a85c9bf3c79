"""Rank, Suit, and Card - immutable card representations."""

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits. Suits carry no gameplay weight in blackjack."""

    SPADES = "Spades"
    CLUBS = "Clubs"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
        }
        return symbols[self]

    @property
    def display_name(self) -> str:
        """Return the human-readable suit name."""
        return self.value


class Rank(Enum):
    """Card ranks in ascending order, Ace low."""

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

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def display_name(self) -> str:
        """Return the human-readable rank name ("Ace", "7", "King")."""
        if self.is_numeric:
            return str(self.value)
        return self.name.title()

    @property
    def base_value(self) -> int:
        """Return the fixed point value (Ace = 1, face cards = 10)."""
        if self.is_face:
            return 10
        return self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_numeric(self) -> bool:
        """Check if this rank is one of 2-10."""
        return 2 <= self.value <= 10

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self.value > 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def name(self) -> str:
        """Return the card name, suit first ("Spades Ace")."""
        return card_name(self)

    @property
    def value(self) -> int:
        """Return the fixed point value of the card's rank."""
        return self.rank.base_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10h', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "A": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str])


def all_ranks() -> list[Rank]:
    """Return all 13 ranks in ascending order."""
    return list(Rank)


def all_suits() -> list[Suit]:
    """Return all 4 suits in their fixed order."""
    return list(Suit)


def all_cards() -> list[Card]:
    """Return the full 52-card set, suit-major."""
    return [Card(suit, rank) for suit in all_suits() for rank in all_ranks()]


def rank_name(rank: Rank) -> str:
    """Return the human-readable name of a rank."""
    return rank.display_name


def card_name(card: Card) -> str:
    """Return the suit name followed by the rank name."""
    return f"{card.suit.display_name} {rank_name(card.rank)}"

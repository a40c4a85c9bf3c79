"""Console front end: drives one game over stdin/stdout."""

import logging
import sys
from random import Random
from typing import TextIO

import click

from blackjack.config import load_config
from blackjack.game import BlackjackGame, EventType, GameEvent, GameState
from blackjack.hand import ScoringPolicy
from blackjack.rules import GameResult

logger = logging.getLogger(__name__)

AFFIRMATIVE = ("y", "Y")


class ConsoleGame:
    """Renders engine events as text and feeds it the player's answers."""

    def __init__(
        self,
        game: BlackjackGame,
        stdin: TextIO | None = None,
        pause: bool = True,
    ) -> None:
        self.game = game
        self._stdin = stdin or click.get_text_stream("stdin")
        self.pause = pause
        game.subscribe(self._on_event)

    def _read_line(self) -> str:
        return self._stdin.readline().rstrip("\r\n")

    def wait(self) -> None:
        """Wait for any line so the game does not run ahead of the reader."""
        if not self.pause:
            return
        click.echo("----")
        self._read_line()

    def confirm(self) -> bool:
        """Read a yes/no answer; only 'y' or 'Y' means yes."""
        return self._read_line() in AFFIRMATIVE

    def _on_event(self, event: GameEvent) -> None:
        data = event.data
        event_type = event.event_type

        if event_type == EventType.CARD_DEALT:
            if data["hand"] == "player":
                click.echo(f"You drew {data['card']}.")
            elif data["face_up"]:
                click.echo(f"The dealer's first card is {data['card']}.")
            else:
                click.echo("The dealer's second card is face down.")
        elif event_type == EventType.PLAYER_BUSTS:
            click.echo(f"Your score is {data['hand_value']}. You busted...")
        elif event_type == EventType.DEALER_REVEALS:
            click.echo(f"The dealer's second card was {data['card']}.")
        elif event_type == EventType.DEALER_HITS:
            click.echo(f"The dealer hits and draws {data['card']}.")
        elif event_type == EventType.DEALER_STANDS:
            click.echo("The dealer stands.")
        elif event_type == EventType.DEALER_BUSTS:
            click.echo(f"The dealer busted with {data['hand_value']}!")

    def run(self) -> GameResult:
        """Play the game from the welcome banner to the result."""
        click.echo("*** Welcome to Blackjack! ***")
        click.echo("Starting the game.")
        self.wait()

        self.game.start()
        self.wait()

        while self.game.state == GameState.PLAYER_ACTION:
            click.echo(f"Your current score is {self.game.player_score}.")
            click.echo("Hit? (Y to draw a card, N to stand)")
            if self.confirm():
                self.game.hit()
            else:
                self.game.stand()

        if self.game.state == GameState.DEALER_ACTION:
            self.wait()

        while self.game.state == GameState.DEALER_ACTION:
            click.echo(f"The dealer's current score is {self.game.dealer_score}.")
            self.game.dealer_step()
            self.wait()

        if self.game.dealer_hand is None:
            self.wait()

        result = self.game.result
        if result == GameResult.PLAYER_WIN:
            click.echo("You win! Congratulations!")
        else:
            click.echo("You lose. Better luck next time.")
        click.echo("Thanks for playing Blackjack!")
        return result


@click.command()
@click.option("--seed", type=int, default=None, help="Seed the shuffle for a reproducible game.")
@click.option(
    "--scoring",
    type=click.Choice([p.value for p in ScoringPolicy]),
    default=None,
    help="Hand scoring policy (default: ace-aware).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics written to stderr.",
)
@click.option("--no-pause", is_flag=True, help="Do not wait for Enter between phases.")
def main(seed: int | None, scoring: str | None, log_level: str | None, no_pause: bool) -> None:
    """Play one hand of blackjack against the dealer."""
    app_config = load_config()

    logging.basicConfig(
        level=(log_level or app_config.logging.level).upper(),
        format=app_config.logging.format,
        stream=sys.stderr,
    )

    policy = ScoringPolicy(scoring) if scoring else app_config.game.scoring
    seed = seed if seed is not None else app_config.game.seed
    rng = Random(seed) if seed is not None else None
    logger.debug("Starting console game (scoring=%s, seed=%s)", policy.value, seed)

    game = BlackjackGame(scoring=policy, rng=rng)
    ConsoleGame(game, pause=app_config.game.pause and not no_pause).run()

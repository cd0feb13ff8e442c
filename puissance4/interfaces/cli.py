"""
cli.py - Command-line front end for Puissance 4

Commands:
    play       play games in the terminal, against a friend or the random bot
    benchmark  let two random bots play many games and report timings
"""

import argparse
import sys
from typing import Callable, List, Optional

import numpy as np

from puissance4.debug import debug, DebugLevel
from puissance4.exceptions import Puissance4Error
from puissance4.utils import GameResult, Slot
from puissance4.data.store import load_snapshot, save_snapshot
from puissance4.game.engine import Engine
from puissance4.players.cli import CLIPlayer, request
from puissance4.players.random_bot import RandomPlayer

DEFAULT_NAMES = {Slot.ONE: "Player 1", Slot.TWO: "Player 2"}
BOT_NAME = "Random bot"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Puissance 4 (Connect Four)')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--debug', action='store_true',
                        help='Enable debug logging (same as --debug-level debug)')
    common.add_argument('--debug-level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Logging verbosity')
    common.add_argument('--log-file', type=str, default=None,
                        help='Also write the log to this file')
    common.add_argument('--seed', type=int, default=None,
                        help='Seed of the random bot(s)')

    play_parser = subparsers.add_parser('play', parents=[common], help='Play interactively')
    play_parser.add_argument('--players', type=int, choices=[1, 2],
                             help='Number of human players (1 plays against the random bot)')
    play_parser.add_argument('--name-one', type=str, help='Name of player 1')
    play_parser.add_argument('--name-two', type=str, help='Name of player 2')
    play_parser.add_argument('--resume', type=str, metavar='FILE',
                             help='Start the first game from a saved snapshot')
    play_parser.add_argument('--autosave', type=str, metavar='FILE',
                             help='Save a snapshot after every move')

    benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                             help='Time random games')
    benchmark_parser.add_argument('--games', type=int, default=1000,
                                  help='Number of games to play')

    return parser


class SimpleCLI:
    """Terminal front end: builds players, runs the engine, prints the outcome."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args = None
        self.engine: Optional[Engine] = None
        self.rng: Optional[np.random.Generator] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the requested command.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_games()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                self.output_fn("Please specify a command. Use --help for options.")
                return 1
        except EOFError:
            self.output_fn("")
            self.output_fn("Input closed, bye.")
        except (Puissance4Error, OSError) as e:
            debug.error(f"{type(e).__name__}: {e}", "cli")
            self.output_fn(f"Error: {e}")
            return 1

        return 0

    def ask(self, prompt: str, options, parse: Callable = int):
        return request(prompt, options, parse=parse,
                       input_fn=self.input_fn, output_fn=self.output_fn)

    def ask_name(self, slot: Slot) -> str:
        self.output_fn(f"Name of player {slot.value}")
        name = self.input_fn("> ").strip()
        return name or DEFAULT_NAMES[slot]

    def setup_players(self):
        """Create or update both players for the next game."""
        players = self.args.players or self.ask("Number of players", [1, 2])

        name_one = self.args.name_one or self.ask_name(Slot.ONE)
        player_one = CLIPlayer(name_one, self.input_fn, self.output_fn)

        if players == 1:
            player_two = RandomPlayer(BOT_NAME, rng=self.rng)
        else:
            name_two = self.args.name_two or self.ask_name(Slot.TWO)
            player_two = CLIPlayer(name_two, self.input_fn, self.output_fn)

        if self.engine is None:
            self.engine = Engine(player_one, player_two)
        else:
            self.engine.set_player(Slot.ONE, player_one)
            self.engine.set_player(Slot.TWO, player_two)
            self.engine.reset()

    def play_games(self) -> None:
        """Play games until the user declines a rematch."""
        self.rng = np.random.default_rng(self.args.seed)
        first = True
        while True:
            self.setup_players()

            if first and self.args.resume:
                self.engine.load_snapshot(load_snapshot(self.args.resume))
                self.output_fn(f"Resuming game from {self.args.resume}")
            first = False

            self.play_one_game()

            again = self.ask("Play again?", ['y', 'n'], parse=lambda s: s.lower())
            if again == 'n':
                return

    def play_one_game(self) -> GameResult:
        engine = self.engine
        while not engine.result.is_game_over():
            outcome = engine.play_turn()
            if self.args.autosave:
                save_snapshot(self.args.autosave, engine)

            mover = engine.player(outcome.slot)
            if isinstance(mover, RandomPlayer):
                self.output_fn(f"{mover.name} plays column {outcome.column}")

        self.output_fn(engine.area.render())
        self.report_result(engine)
        return engine.result

    def report_result(self, engine: Engine):
        name = engine.winner_name()
        if name is None:
            self.output_fn("Draw")
        else:
            self.output_fn(f"{name} wins")

    def benchmark(self) -> None:
        """Play random games and report how long they take."""
        games = self.args.games
        if games <= 0:
            self.output_fn("Nothing to do: --games must be positive")
            return

        rng = np.random.default_rng(self.args.seed)
        engine = Engine(RandomPlayer("Bot 1", rng), RandomPlayer("Bot 2", rng))
        results = {result: 0 for result in GameResult if result.is_game_over()}
        total_moves = 0

        self.output_fn(f"Running benchmark with {games} games...")
        debug.start_timer("benchmark")
        for _ in range(games):
            engine.reset()
            while not engine.result.is_game_over():
                engine.play_turn()
                total_moves += 1
            results[engine.result] += 1
        elapsed = debug.end_timer("benchmark", "cli")

        self.output_fn(f"Played {games} games with {total_moves} total moves: "
                       f"{elapsed:.6f} seconds total, "
                       f"{elapsed / games * 1000:.6f} ms per game, "
                       f"{elapsed / total_moves * 1000:.6f} ms per move")
        for result, count in results.items():
            self.output_fn(f"  {result.name}: {count}")


def main(argv: Optional[List[str]] = None) -> int:
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())

"""
TicTacToe console UI
A colored text interface for the game using colorama.

Shows:
- Banner and setup menus (board type, game mode, names, difficulty)
- The board (layer by layer for the 3x3x3 cube)
- Move prompts, AI moves and the game result
- Play again
"""

import random
from typing import Callable, List, Optional

import colorama
from colorama import Fore, Style

from tictactoe.config import Difficulty, GameConfig, GameMode, GameSettings
from tictactoe.game_session import GameSession
from tictactoe.game_state import Coord, Geometry, Mark
from tictactoe.move_validator import MoveValidator, format_coords
from tictactoe.win_checker import OutcomeKind


class Colors:
    """Wrap text in ANSI colors."""

    @staticmethod
    def red(value) -> str:
        return Fore.RED + str(value) + Style.RESET_ALL

    @staticmethod
    def green(value) -> str:
        return Fore.GREEN + str(value) + Style.RESET_ALL

    @staticmethod
    def yellow(value) -> str:
        return Fore.YELLOW + str(value) + Style.RESET_ALL

    @staticmethod
    def cyan(value) -> str:
        return Fore.CYAN + str(value) + Style.RESET_ALL

    @staticmethod
    def magenta(value) -> str:
        return Fore.MAGENTA + str(value) + Style.RESET_ALL

    @staticmethod
    def bold(value) -> str:
        return Style.BRIGHT + str(value) + Style.RESET_ALL

    @staticmethod
    def mark(mark: Mark) -> str:
        """Color a mark the way GameSettings.MARK_COLORS says."""
        color = GameSettings.MARK_COLORS.get(mark)
        if color is None:
            return mark.value
        return getattr(Fore, color) + mark.value + Style.RESET_ALL


BANNER = """
  ╔═══════════════════════════════════════╗
  ║           TIC TAC TOE                 ║
  ║   Classic 3x3 and 3x3x3 cube boards   ║
  ╚═══════════════════════════════════════╝
"""


class TicTacToeUI:
    """
    Main UI class for console TicTacToe.

    Anything passed to the constructor is used as-is. Everything else is
    asked for through the setup menus.
    """

    def __init__(
        self,
        geometry: Optional[Geometry] = None,
        mode: Optional[GameMode] = None,
        difficulty: Optional[Difficulty] = None,
        player_one_name: Optional[str] = None,
        player_two_name: Optional[str] = None,
        ai_first: bool = False,
        rng: Optional[random.Random] = None,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[..., None] = print,
    ):
        """Initialize the UI."""
        self.geometry = geometry
        self.mode = mode
        self.difficulty = difficulty
        # None means "ask in the menus"
        self.player_one_name = player_one_name
        self.player_two_name = player_two_name
        self.ai_first = ai_first
        self.rng = rng if rng is not None else random.Random()

        self._input = input_fn
        self._print = print_fn
        self.validator = MoveValidator()

    # ==================== SETUP ====================

    def display_banner(self):
        self._print(Colors.cyan(Colors.bold(BANNER)))

    def _read_number(self, count: int) -> int:
        """Ask until the answer is a number (range is up to the caller)."""
        while True:
            text = self._input(f"Enter choice (1-{count}): ")
            try:
                return int(text.strip())
            except ValueError:
                self._print(Colors.red("Invalid input! Please enter a number."))

    def _menu(self, title: str, options: List[str]) -> int:
        """Show a numbered menu and return the number typed."""
        self._print("\n" + Colors.yellow(title))
        for number, option in enumerate(options, start=1):
            self._print(f"{number}. {option}")
        return self._read_number(len(options))

    def setup_game(self) -> GameConfig:
        """
        Ask for every setting that was not given up front.

        Returns:
            The configuration for the whole session.
        """
        geometry = self.geometry
        if geometry is None:
            choice = self._menu("Choose Board Type:", ["Classic 2D (3x3)", "Advanced 3D (3x3x3)"])
            geometry = Geometry.CUBIC if choice == 2 else Geometry.PLANAR

        mode = self.mode
        if mode is None:
            choice = self._menu("Choose Game Mode:", ["Single Player (vs AI)", "Multiplayer (vs Human)"])
            mode = GameMode.SINGLE_PLAYER if choice == 1 else GameMode.TWO_PLAYER

        player_one_name = self.player_one_name
        player_two_name = self.player_two_name
        difficulty = self.difficulty or GameSettings.DEFAULT_DIFFICULTY

        if mode == GameMode.SINGLE_PLAYER:
            if player_one_name is None:
                player_one_name = self._ask_name("\nEnter your name: ", 0)

            if self.difficulty is None:
                levels = list(Difficulty)
                choice = self._menu(
                    "Choose Difficulty:",
                    [GameSettings.DIFFICULTY_LABELS[level] for level in levels]
                )
                # Anything off the menu plays at the default level
                if 1 <= choice <= len(levels):
                    difficulty = levels[choice - 1]
        else:
            if player_one_name is None:
                player_one_name = self._ask_name("\nEnter Player 1 name (X): ", 0)
            if player_two_name is None:
                player_two_name = self._ask_name("Enter Player 2 name (O): ", 1)

        return GameConfig(
            geometry=geometry,
            mode=mode,
            difficulty=difficulty,
            player_one_name=player_one_name or GameSettings.DEFAULT_PLAYER_NAMES[0],
            player_two_name=player_two_name or GameSettings.DEFAULT_PLAYER_NAMES[1],
            ai_first=self.ai_first,
        )

    def _ask_name(self, prompt: str, index: int) -> str:
        name = self._input(Colors.green(prompt)).strip()
        return name or GameSettings.DEFAULT_PLAYER_NAMES[index]

    # ==================== BOARD ====================

    def _cell(self, mark: Mark, coords: Coord, winning_line) -> str:
        if winning_line and coords in winning_line:
            return Colors.green(Colors.bold(mark.value))
        return Colors.mark(mark)

    def _grid(self, rows: List[List[Mark]], layer: Optional[int], winning_line) -> List[str]:
        lines = [
            "     1   2   3",
            "   ╔═══╦═══╦═══╗",
        ]
        for row, marks in enumerate(rows):
            cells = []
            for col, mark in enumerate(marks):
                coords = (row, col) if layer is None else (layer, row, col)
                cells.append(f" {self._cell(mark, coords, winning_line)} ")
            lines.append(f" {row + 1} ║" + "║".join(cells) + "║")
            if row < len(rows) - 1:
                lines.append("   ╠═══╬═══╬═══╣")
        lines.append("   ╚═══╩═══╩═══╝")
        return lines

    def render(self, session: GameSession):
        """Draw the board (and say so if the AI is about to move)."""
        board = session.board
        winning_line = session.outcome.line
        layers = board.layers()

        if board.geometry == Geometry.PLANAR:
            self._print("\n" + "\n".join(self._grid(layers[0], None, winning_line)) + "\n")
        else:
            self._print("\n" + Colors.cyan("3D Board (Layer by Layer):"))
            for layer, rows in enumerate(layers):
                self._print(Colors.yellow(f"\nLayer {layer + 1}:"))
                self._print("\n".join(self._grid(rows, layer, winning_line)))

        if session.is_ai_turn and not session.is_game_over:
            self._print(Colors.yellow("AI is thinking..."))

    # ==================== TURNS ====================

    def request_move(self, session: GameSession, error_message: Optional[str] = None) -> Coord:
        """
        Ask the current player for a move until it parses.

        Whether the cell is free is checked by the session, which calls
        back here with its error message if it is not.
        """
        if error_message:
            self._print(Colors.red(f"Invalid move! {error_message} Try again."))

        mark = session.current_mark
        geometry = session.board.geometry

        prompt = f"{mark.value}'s turn. "
        if session.config.mode == GameMode.TWO_PLAYER:
            prompt += f"({session.config.name_for(mark)}) "
        if geometry == Geometry.PLANAR:
            prompt += "Enter row and column (1-3): "
        else:
            prompt += "Enter layer, row and column (1-3): "

        while True:
            result = self.validator.parse_coordinates(self._input(Colors.cyan(prompt)), geometry)
            if result.is_valid:
                return result.coords
            self._print(Colors.red(result.error_message))

    def announce_ai_move(self, session: GameSession, coords: Coord):
        self._print(Colors.green(f"AI played at {format_coords(coords)}."))

    def show_result(self, session: GameSession):
        """Print who won."""
        outcome = session.outcome

        if outcome.kind == OutcomeKind.WIN:
            config = session.config
            if config.is_single_player and outcome.winner == config.ai_mark:
                text = "AI WINS! Better luck next time!"
            else:
                text = f"{session.winner_name()} WINS!"
            self._print(Colors.green(Colors.bold(f"\n{text}")))
        elif outcome.kind == OutcomeKind.DRAW:
            self._print(Colors.yellow(Colors.bold("\nIt's a DRAW!")))

    def ask_play_again(self) -> bool:
        answer = self._input("\n" + Colors.cyan("Play again? (y/n): "))
        return answer.strip().lower().startswith("y")

    # ==================== MAIN LOOP ====================

    def run(self) -> int:
        """
        Run setup, then games until the player stops.

        Returns:
            Process exit code (always 0).
        """
        colorama.just_fix_windows_console()
        self.display_banner()

        try:
            session = GameSession(self.setup_game(), self.rng)

            while True:
                session.run(self.request_move, self.render, self.announce_ai_move)
                self.show_result(session)

                if not self.ask_play_again():
                    break
                session.reset()
        except (KeyboardInterrupt, EOFError):
            self._print("\n\nGame interrupted by user.")
        finally:
            self._print(Colors.magenta(Colors.bold("\nThanks for playing TicTacToe!")))

        return 0

"""Stateful 2048 game holding one state and its random generator."""

from numpy import ndarray

from tileslide.config import GameConfig
from tileslide.core.gameboard import new_generator
from tileslide.core.gamemove import Direction, legal_actions
from tileslide.envs.gamestate import GameState, new_game, step


class TwentyFortyEight:
    """
    2048 game.

    This class keeps the current ``GameState`` between moves for callers that prefer an object over
    threading the state themselves.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the game and start a first round.

        Parameters
        ----------
        config : GameConfig, optional
            Board size, starting tiles and seed (defaults to a 4x4 board with two tiles).
        """
        self.config = config or GameConfig()
        self.size = self.config.size
        self.reset(seed=self.config.seed)

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def board(self) -> ndarray:
        """Current game board, read-only."""
        return self._state.board

    @property
    def score(self) -> int:
        """Sum of all tiles on the board."""
        return self._state.score

    @property
    def is_finished(self) -> bool:
        """True if no move can change the board."""
        return self._state.game_over

    @property
    def legal_actions(self) -> list[Direction]:
        """Directions that change the board."""
        if self._state.game_over:
            return []
        return legal_actions(self._state.board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with the configured starting tiles.

        Parameters
        ----------
        seed : int, optional
            Seed for the new game's random generator.

        Returns
        -------
        ndarray
            The new game board.
        """
        self._rng = new_generator(seed)
        self._state = new_game(self._rng, size=self.size, number_tile=self.config.initial_tiles)
        return self.board

    def step(self, action: Direction | str) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        action : Direction or str
            Direction of the move, or its name as a key of ``ACTIONS``.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The game board after the move (ndarray)
            - The score (int)
            - Whether the game has finished (bool)

        Notes
        -----
        No tile is added when the move does not change the board or when the game is already over.
        """
        if isinstance(action, str):
            action = self.ACTIONS[action]
        self._state, _ = step(self._state, action, self._rng)
        return self.board, self.score, self.is_finished

    def render(self) -> str:
        """
        Render the game board as text, one line per row and a tab between cells.
        """
        return '\n'.join(' \t'.join(map(str, row)) for row in self._state.board.tolist())

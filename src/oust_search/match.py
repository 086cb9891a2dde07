"""
Match host: plays Oust games between players under a per-turn time budget.

The host owns the authoritative game state. Before each turn it arms a timer
that calls the mover's notify_deadline(), then applies the returned path.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from tqdm import tqdm

from oust_search.config import BOARD_CONFIG, MATCH_CONFIG
from oust_search.game.game import PLAYER1, PLAYER2, get_opponent
from oust_search.game.oust import OustState


logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    winner: Optional[int]
    turns: int
    outcomes: List = field(default_factory=list)
    forfeit: bool = False


def play_game(player1, player2, size=BOARD_CONFIG['size'], time_limit_s=MATCH_CONFIG['time_limit_s'], max_turns=None):
    """
    Play a single game.

    Args:
        player1: Player moving first (color 1)
        player2: Player moving second (color -1)
        size: Board radius
        time_limit_s: Seconds before notify_deadline() is sent each turn
        max_turns: Optional turn cap (None = play to the end)

    Returns:
        GameRecord with the winner (1, -1 or None) and every SearchOutcome
    """
    state = OustState(size)
    players = {PLAYER1: player1, PLAYER2: player2}
    record = GameRecord(winner=None, turns=0)

    while not state.is_game_over():
        if max_turns is not None and record.turns >= max_turns:
            break

        color = state.current_player
        player = players[color]

        timer = threading.Timer(time_limit_s, player.notify_deadline)
        timer.daemon = True
        timer.start()
        try:
            outcome = player.move(state.copy())
        finally:
            timer.cancel()

        record.outcomes.append(outcome)
        record.turns += 1

        try:
            for move in outcome.path:
                if state.is_game_over() or state.current_player != color:
                    break
                state.place_stone(move)
        except ValueError as e:
            logger.warning("%s played an illegal move and forfeits: %s", player.name, e)
            record.winner = get_opponent(color)
            record.forfeit = True
            return record

        if not outcome.path:
            logger.warning("%s returned an empty turn and forfeits", player.name)
            record.winner = get_opponent(color)
            record.forfeit = True
            return record

    record.winner = state.get_winner()
    return record


def play_match(player_a, player_b, num_games=MATCH_CONFIG['num_games'], size=BOARD_CONFIG['size'],
               time_limit_s=MATCH_CONFIG['time_limit_s'], verbose=True):
    """
    Play num_games between two players, alternating who moves first.

    Returns:
        dict with wins for each player, draws and player_a's win rate
    """
    wins_a = 0
    wins_b = 0
    draws = 0

    for game_num in tqdm(range(num_games), desc="Games", ncols=80, disable=not verbose):
        a_first = game_num % 2 == 0
        if a_first:
            record = play_game(player_a, player_b, size, time_limit_s)
            a_color = PLAYER1
        else:
            record = play_game(player_b, player_a, size, time_limit_s)
            a_color = PLAYER2

        if record.winner is None:
            draws += 1
        elif record.winner == a_color:
            wins_a += 1
        else:
            wins_b += 1

        logger.info("Game %d: winner=%s turns=%d", game_num + 1, record.winner, record.turns)

    return {
        'wins_a': wins_a,
        'wins_b': wins_b,
        'draws': draws,
        'win_rate_a': wins_a / num_games if num_games else 0.0,
    }

from __future__ import annotations

import argparse
import random
from typing import List, Optional

from config import get_config, get_engine_settings, get_ui_settings, load_config_from_file, setup_logging
from quoridor import GameState, HumanPlayer, Player, SearchPlayer, play_game, render_board


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play Quoridor in the terminal")
    ap.add_argument("--player1", choices=("human", "ai"), default="human", help="Who plays A (starts on e9)")
    ap.add_argument("--player2", choices=("human", "ai"), default="ai", help="Who plays B (starts on e1)")
    ap.add_argument("--depth", type=int, default=None, help="Search depth for AI players")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the AI's random fallback")
    ap.add_argument("--moves", nargs="*", default=[], help="Moves to replay before play starts")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    return ap.parse_args(argv)


def build_player(kind: str, rng: random.Random) -> Player:
    if kind == "ai":
        return SearchPlayer(rng=rng)
    return HumanPlayer(prompt="Move (e.g. e8 or e3h): ")


def apply_overrides(args: argparse.Namespace) -> None:
    """Command-line engine options take precedence over file and environment."""
    overrides = {k: v for k, v in (("default_depth", args.depth), ("seed", args.seed)) if v is not None}
    get_config().update_from_dict({"engine": overrides})


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    if args.config:
        load_config_from_file(args.config)
    apply_overrides(args)
    setup_logging()

    rng = random.Random(get_engine_settings().seed)
    players = [build_player(args.player1, rng), build_player(args.player2, rng)]
    state = GameState.from_moves(args.moves)

    def on_move(gs: GameState, move: str) -> None:
        print(f"Played {move}")
        print(render_board(gs))

    def on_invalid(gs: GameState, move: str) -> None:
        print("Invalid move")

    print(render_board(state))
    winner = play_game(state, players, on_move=on_move, on_invalid=on_invalid)
    if winner is not None:
        ui = get_ui_settings()
        icon = (ui.player1_icon, ui.player2_icon)[winner]
        print(f"Player {icon} wins after {state.turn} turns")


if __name__ == "__main__":
    main()

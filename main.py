from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from connect4.ai.config import AI_LEVELS, DEFAULT_DEPTH
from connect4.ai.greedy import GreedyStrategy
from connect4.ai.minimax import NegamaxAI
from connect4.ai.player import StatefulPlayer
from connect4.app.arena import Arena, RefereeError
from connect4.app.human import HumanStrategy, QuitRequested
from connect4.cli.view import CliView, Message, MessageType


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _depth(depth: Optional[int], lvl: Optional[int]) -> int:
    if depth is not None:
        return depth
    if lvl is not None:
        return AI_LEVELS[lvl].max_depth
    return DEFAULT_DEPTH


def run_pvc(depth: int, human_first: bool) -> int:
    cpu_name = f"CPU(depth {depth})"
    if human_first:
        view = CliView(red_name="You", blue_name=cpu_name, clear=True)
    else:
        view = CliView(red_name=cpu_name, blue_name="You", clear=True)
    human = StatefulPlayer(HumanStrategy(view=view), name="You")
    cpu = StatefulPlayer(NegamaxAI(max_depth=depth), name=cpu_name)
    red, blue = (human, cpu) if human_first else (cpu, human)
    try:
        Arena(view=view).play(red, blue)
    except QuitRequested:
        view.show(Message(MessageType.QUIT, "Exiting..."))
    return 0


def run_cvc(red_depth: int, blue_depth: int) -> int:
    view = CliView(red_name=f"CPU(depth {red_depth})", blue_name=f"CPU(depth {blue_depth})")
    red = StatefulPlayer(NegamaxAI(max_depth=red_depth))
    blue = StatefulPlayer(NegamaxAI(max_depth=blue_depth))
    Arena(view=view).play(red, blue)
    return 0


def run_greedy() -> int:
    view = CliView(red_name="Greedy(red)", blue_name="Greedy(blue)")
    Arena(view=view).play(StatefulPlayer(GreedyStrategy()), StatefulPlayer(GreedyStrategy()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Connect-Four on a 7x4 board")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = ap.add_subparsers(dest="mode", required=True)

    ap_pvc = sub.add_parser("pvc", help="Play against the computer")
    level = ap_pvc.add_mutually_exclusive_group()
    level.add_argument("--depth", type=_positive_int, help="Search depth in plies")
    level.add_argument(
        "--lvl",
        type=int,
        choices=range(1, len(AI_LEVELS) + 1),
        help=f"Computer difficulty level (1-{len(AI_LEVELS)})",
    )
    ap_pvc.add_argument(
        "--human-first",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Move first as RED (default: computer moves first)",
    )

    ap_cvc = sub.add_parser("cvc", help="Computer against computer")
    ap_cvc.add_argument("--red-depth", type=_positive_int, default=DEFAULT_DEPTH)
    ap_cvc.add_argument("--blue-depth", type=_positive_int, default=DEFAULT_DEPTH)

    sub.add_parser("greedy", help="Greedy filler against greedy filler")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.mode == "pvc":
            return run_pvc(_depth(args.depth, args.lvl), args.human_first)
        if args.mode == "cvc":
            return run_cvc(args.red_depth, args.blue_depth)
        return run_greedy()
    except RefereeError as exc:
        print(f"[ERR] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

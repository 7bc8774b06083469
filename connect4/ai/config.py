from dataclasses import dataclass


# Terminal scores (adjusted by remaining depth so quicker wins rank higher)
WIN_SCORE = 100_000
LOSE_SCORE = -100_000
DRAW_SCORE = 0
# Root alpha/beta window, wider than any reachable score
MIN_REWARD = -10_000_000
MAX_REWARD = 10_000_000
# Column visit order for move generation: center-out, right side first on ties
COLUMN_ORDER = (3, 4, 2, 5, 1, 6, 0)
# Leaf heuristic weight per column (distance from center 0 -> 4 ... 3 -> 1)
COLUMN_WEIGHTS = (1, 2, 3, 4, 3, 2, 1)

DEFAULT_DEPTH = 6


@dataclass(frozen=True)
class AILevelConfig:
    max_depth: int

AI_LEVELS = {
    1: AILevelConfig(max_depth=1),
    2: AILevelConfig(max_depth=2),
    3: AILevelConfig(max_depth=4),
    4: AILevelConfig(max_depth=6),
    5: AILevelConfig(max_depth=8),
    6: AILevelConfig(max_depth=11),
}

# Timing
TICK_MS = 20                       # simulation step, independent of frame rate
FIRST_SPAWN_DELAY_MS = 1000        # first circle appears after this much play time
BASE_SPAWN_INTERVAL_MS = 2000      # spawn interval at score 0
SPAWN_INTERVAL_LOG_FACTOR = 700    # interval shrinks with log10(score / 2 + 1)
MIN_SPAWN_INTERVAL_MS = 200        # floor for very high scores

# Circles
BASE_CIRCLE_SIZE = 250             # diameter at score 0 (px)
CIRCLE_SIZE_LOG_FACTOR = 50        # size shrinks with log10(score + 1)
MIN_CIRCLE_SIZE = 20               # floor for very high scores, above EXPIRE_SIZE
EXPIRE_SIZE = 5                    # circles at or below this size are gone
SHRINK_PER_TICK = 1                # px per tick
SPAWN_MARGIN = 10                  # keep circles off the edges

# Lives
INITIAL_LIVES = 10
EXTRA_LIFE_STEP = 10               # one bonus life every N points
MISS_PENALTY = 1                   # lives lost for a click that hits nothing

# Persistence
HIGHSCORE_KEY = "highscore"

# Colors
BG_COLOR = (5, 66, 135)
TEXT_COLOR = (5, 200, 135)
GAME_OVER_COLOR = (5, 200, 235)
HIGHSCORE_COLOR = (255, 215, 0)
OUTLINE_COLOR = (5, 30, 70)
OUTLINE_WIDTH = 4
PALETTE = (
    (200, 66, 135),
    (235, 110, 60),
    (250, 200, 60),
    (120, 220, 90),
    (150, 110, 240),
)

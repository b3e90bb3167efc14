from __future__ import annotations

# Board size in cells, walls included.
BOARD_WIDTH = 40
BOARD_HEIGHT = 20

TICK_SECONDS = 0.1
SCORE_PER_FOOD = 1

HEAD = "O"
BODY = "o"
FOOD = "*"
WALL = "#"
EMPTY = " "

HINT = "Use arrow keys to move, 'q' to quit"

# Path to a debug log file; logging stays on stderr at WARNING when unset.
LOG_ENV_VAR = "TERMSNAKE_LOG"

# How long curses waits after Esc for the rest of an escape sequence.
ESC_DELAY_MS = 25

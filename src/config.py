TERMINAL_WIDTH = 60
TERMINAL_HEIGHT = 30

# Screen regions (1-based terminal cells). Each region shares its top border
# row with the bottom border of the region above it.
TITLE_POSITION_X = 1
TITLE_POSITION_Y = 1
TITLE_WIDTH = TERMINAL_WIDTH
TITLE_HEIGHT = 3

HUD_POSITION_X = 1
HUD_POSITION_Y = TITLE_POSITION_Y + TITLE_HEIGHT - 1
HUD_WIDTH = TERMINAL_WIDTH
HUD_HEIGHT = 6

GAME_POSITION_X = 1
GAME_POSITION_Y = HUD_POSITION_Y + HUD_HEIGHT - 1
GAME_WIDTH = TERMINAL_WIDTH
GAME_HEIGHT = TERMINAL_HEIGHT - HUD_HEIGHT - TITLE_HEIGHT

# Playable interior of the game region
GAME_AREA_WIDTH = GAME_WIDTH - 2
GAME_AREA_HEIGHT = GAME_HEIGHT - 2

# Loop cadences (seconds)
LOGIC_TICK_INTERVAL = 0.1
FRAME_INTERVAL = 1.0 / 12.0
INPUT_POLL_TIMEOUT = 0.01

# How long curses waits after ESC before deciding it is not an escape sequence
ESC_DELAY_MS = 25

# Snake defaults
SNAKE_PERIOD_MS = 100
SNAKE_LIVES = 5
SNAKE_START_SEGMENTS = 4
SNAKE_START_X = GAME_AREA_WIDTH // 2
SNAKE_START_Y = GAME_AREA_HEIGHT // 2

SNAKE_GLYPH = "▒"
APPLE_GLYPH = "🍎"

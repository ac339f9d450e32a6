"""Constants for the NERTZ.PRO score tracker."""

# Storage key under which the whole game is persisted
STORAGE_KEY = 'nertzpro.state'

# Default file backing the JSON store
DEFAULT_STATE_PATH = 'nertzpro_state.json'

# Conventional end-of-game score (recorded, not enforced)
DEFAULT_TARGET_SCORE = 100

# Fewest players that can start a game
MIN_PLAYERS = 2

# Scores were stored as signed 8-bit integers
SCORE_MIN = -128
SCORE_MAX = 127

# Reported by get_focused() when no cell is editing. Only a real cell once
# round 0 exists.
DEFAULT_FOCUS = (0, 0)

# Scoresheet rendering
EMPTY_CELL = '--'
FOCUS_MARKER = '*'

# Round timing (seconds)
SESSION_SECONDS = 60               # whole round
SIGN_SECONDS = 10                  # time to answer one sign
TICK_MS = 1000

# UX
FEEDBACK_MS = 200                  # how long the correct/incorrect tint stays up
DEFAULT_LEVEL = "normal"

# Sign-change cue
BEEP_HZ = 880.0                    # A5
BEEP_MS = 100
BEEP_GAIN = 0.1

# Layout / colours
HUD_COLOR = (230, 230, 230)
MUTED_COLOR = (150, 160, 175)
ACCENT_COLOR = (34, 211, 238)
RING_TRACK_COLOR = (51, 65, 85)
RING_BORDER_COLOR = (71, 85, 105)
CORRECT_COLOR = (34, 197, 94)
INCORRECT_COLOR = (239, 68, 68)
ICON_COLOR = (241, 245, 249)
PANEL_COLOR = (30, 41, 59)

DIAL_RADIUS = 150
RING_WIDTH = 10
HUD_FONT_SIZE = 30
BIG_FONT_SIZE = 64

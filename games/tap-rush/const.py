# Board
BG_COLOR = (12, 14, 18)
VIGNETTE_ALPHA = 90                # darkening at the board edges (0-255)
FRAME_COLOR = (255, 255, 255)
FRAME_ALPHA = 40
FRAME_WIDTH = 18
FRAME_INSET = 12

# Holes and targets
HOLE_COLOR = (40, 36, 34)
HOLE_RIM_COLOR = (78, 70, 64)
PRIMARY_COLOR = (70, 160, 230)
PRIMARY_CAP_COLOR = (220, 235, 245)
BONUS_COLOR = (255, 105, 180)
BONUS_GLOW_COLOR = (255, 77, 196)
SHADOW_COLOR = (0, 0, 0)
HIT_FLASH_COLOR = (255, 235, 90)
POP_DURATION_MS = 160              # pop-up animation length
LIFE_RING_COLOR = (235, 235, 235)

# Particles
PARTICLE_HIT_COLOR = (255, 255, 255)
PARTICLE_BONUS_COLOR = (255, 105, 180)
PARTICLE_ALPHA = 0.9

# HUD
HUD_COLOR = (230, 230, 230)
HUD_DIM_COLOR = (170, 170, 170)
MULT_ACTIVE_COLOR = (255, 105, 180)
HUD_FONT_SIZE = 30
HUD_MARGIN = 20

# Start button / game over panel
BUTTON_SIZE = (260, 72)
BUTTON_COLOR = (70, 180, 110)
BUTTON_TEXT_COLOR = (245, 245, 245)
PANEL_COLOR = (20, 22, 28)
PANEL_ALPHA = 220
PANEL_SIZE = (440, 220)
TITLE_FONT_SIZE = 56
BIG_FONT_SIZE = 40

# galton/shared/constants.py

APP_TITLE = "Galton Board"
WIDTH, HEIGHT = 1000, 760
FPS = 60

# horizontal margin kept free on each side of the board surface
CANVAS_MARGIN_LEFT = 10
CANVAS_MARGIN_RIGHT = 10
CONTROL_BAR_H = 96

WHITE = (245, 245, 245)
BLACK = (20, 20, 20)
GRAY = (120, 120, 120)
BLUE = (70, 140, 255)
ORANGE = (255, 170, 70)

BOARD_BG = (250, 250, 250)
BALL_COLOR = (41, 128, 185)
PEG_COLOR = (52, 73, 94)
BIN_COLOR = (127, 140, 141)
LABEL_COLOR = (51, 51, 51)

# viz/renderer_colors.py
BG = (0, 0, 30)
HEAD = (50, 205, 50)
BODY = (0, 180, 0)
BODY_ALT = (0, 155, 0)
EYE = (255, 255, 255)
FOOD = (255, 0, 0)
FOOD_TEXT = (255, 255, 255)
TEXT = (255, 255, 255)
GAME_OVER = (255, 255, 0)


def background(blue: int):
    return (BG[0], BG[1], min(255, BG[2] + blue))

# viz/renderer_colors.py
BG = (26, 51, 77)          # 0.1, 0.2, 0.3
SNAKE = (0, 255, 0)
APPLE = (255, 0, 0)
BORDER = (255, 255, 255)
MESH = (0, 0, 128)
TEXT = (230, 230, 230)

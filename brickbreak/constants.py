"""Game tuning values: arena geometry, speeds, sizes and colours."""

# Arena
LEFT_WALL = -450.0
RIGHT_WALL = 450.0
BOTTOM_WALL = -300.0
TOP_WALL = 300.0
WALL_THICKNESS = 10.0

# Paddle
PADDLE_SIZE = (120.0, 20.0)
GAP_BETWEEN_PADDLE_AND_FLOOR = 60.0
PADDLE_SPEED = 500.0
PADDLE_PADDING = 10.0

# Ball
BALL_STARTING_POSITION = (0.0, -50.0, 1.0)
BALL_DIAMETER = 30.0
BALL_SPEED = 400.0
INITIAL_BALL_DIRECTION = (0.5, -0.5)

# Bricks
BRICK_SIZE = (100.0, 30.0)
GAP_BETWEEN_PADDLE_AND_BRICKS = 270.0
GAP_BETWEEN_BRICKS = 5.0
GAP_BETWEEN_BRICKS_AND_CEILING = 20.0
GAP_BETWEEN_BRICKS_AND_SIDES = 20.0

# Scoreboard
SCOREBOARD_FONT_SIZE = 33.0
SCOREBOARD_TEXT_PADDING = 5.0

# Colours as sRGB components in the range 0..1
BACKGROUND_COLOR = (0.05, 0.05, 0.1)
PADDLE_COLOR = (0.0, 0.8, 0.8)
BALL_COLOR = (1.0, 1.0, 0.3)
BRICK_COLOR = (0.9, 0.2, 0.2)
WALL_COLOR = (0.3, 0.3, 0.4)
TEXT_COLOR = (0.0, 0.9, 0.9)
SCORE_COLOR = (0.9, 0.9, 0.0)
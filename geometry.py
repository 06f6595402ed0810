#!/usr/bin/env python3
# geometry.py - Maze and world geometry constants

CELL_SIZE     = 1.0          # world units per grid cell
MAZE_W, MAZE_H = 15, 15      # default maze size (forced odd)
PLAYER_RADIUS = 0.2          # horizontal extent used by the footprint check
EYE_HEIGHT    = 0.5          # player Y is locked to this
MOVE_SPEED    = 2.5          # world units per second
GOAL_RADIUS   = 1.0          # "near goal" distance

# Network
DEFAULT_PORT    = 8080
DEFAULT_ADDRESS = "127.0.0.1"
BUFFER_SIZE     = 1024

# Colors (RGB in [0, 1])
TINT_FAR     = (1.0, 1.0, 1.0)   # far from the goal
TINT_NEAR    = (0.4, 0.2, 1.0)   # standing on the goal
DEFAULT_TINT = (1.0, 1.0, 1.0)   # used when an unlock payload does not parse

# Direction vectors for the four grid neighbours
# East(0), South(1), West(2), North(3)
DX = [1, 0, -1, 0]
DZ = [0, 1, 0, -1]

from pathlib import Path

# --- Display ---
WIDTH = 1280                # fallback canvas size when the desktop size is unknown
HEIGHT = 720
FPS = 60
TITLE = "Portfolio Platformer"

# --- World / Physics (per frame, not per second) ---
GRAVITY = 0.5               # px/frame^2 added to vy every frame
JUMP_VELOCITY = -10.0       # vy set on jump (negative = up)
WALK_TOGGLE_FRAMES = 10     # walk/idle sprite swap period while a direction key is held

# --- Player ---
PLAYER_START_X = 50
PLAYER_START_Y = 300
PLAYER_W = 100
PLAYER_H = 100
PLAYER_SPEED = 5
START_JITTER_X = 40.0       # env reset: spawn x drawn from PLAYER_START_X +/- this

# Sprite paths, relative to the asset root (public/)
SPRITES = {
    "idle": {
        "right": "images/forward_idle.png",
        "left": "images/backward_idle.png",
    },
    "walk": {
        "right": "images/forward_walk.png",
        "left": "images/backward_walk.png",
    },
    "jump": {
        "right": "images/forward_jump.png",
        "left": "images/backward_jump.png",
    },
}
BACKGROUND_IMAGE = "images/background.png"

# --- Platforms ---
FLOOR_OFFSET = 70           # invisible floor sits this far above the canvas bottom
FLOOR_THICKNESS = 10

# (x, y, w, h, text, link, vx, vy); the floor platform is appended at build time
PLATFORM_LAYOUT = (
    (50, 500, 200, 30, "Try clicking the WASD Keys", None, 0, 0),
    (50, 75, 225, 30, "Click Here for my Github", "https://github.com/djmiramontes", 0, 0),
    (50, 175, 225, 30, "Click Here for my LinkedIn",
     "https://www.linkedin.com/in/diego-miramontes-b7164a2b0/", 0, 0),
    (850, 250, 200, 30, "Future Projects:", None, 0, 0),
    (750, 350, 400, 30, "An online retail bot to purchase limited online items", None, 0, 0),
    (750, 450, 300, 30, "A custom Mini LLM for personal use", None, 0, 0),
    (200, 275, 150, 20, "", None, 2, 0),   # moving platform
)

# --- Text ---
FONT_NAME = "arial"
FONT_SIZE = 16

# --- Colors (RGB) ---
COLOR_BG = (0, 0, 0)
COLOR_PLAT = (255, 255, 255)
COLOR_TEXT = (0, 0, 0)

# --- Static host ---
PORT_DEFAULT = 3000
# resolved from this file, not the working directory
PUBLIC_DIR = str(Path(__file__).resolve().parents[2] / "public")

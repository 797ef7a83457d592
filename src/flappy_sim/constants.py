"""
constants.py: Default game configuration values.
"""

# -------- Playfield Config --------
PLAYFIELD_WIDTH = 320           # Common retro game width
PLAYFIELD_HEIGHT = 480          # Common retro game height

# -------- Actor Config --------
ACTOR_X = 50                    # Fixed actor X position
ACTOR_WIDTH = 34
ACTOR_HEIGHT = 24

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 52
GAP_HEIGHT = 120                # Space between top and bottom barrier
MIN_SEGMENT_HEIGHT = 50         # Shortest allowed top/bottom barrier
OBSTACLE_SPEED = 2.0            # Horizontal speed (pixels/tick)
SPAWN_INTERVAL_MS = 1800        # Milliseconds between spawns

# -------- Physics Config (Pixels / Tick) --------
# Fixed per-tick constants, no delta-time scaling
GRAVITY = 0.4                   # Added to velocity every tick
FLAP_IMPULSE = -7.0             # Velocity set by a flap (override, not added)

# -------- Presentation Config --------
RENDER_FPS = 60

"""
Configuration for the asteroids simulation
All time-based values are in milliseconds, matching the frame delta the
drivers feed into the simulation step.
"""

# ==============================================================================
# SIMULATION PARAMETERS
# Velocities are px/ms, rotation speed is deg/ms
# ==============================================================================

SIM_CONFIG = {
    "width": 800,
    "height": 600,
    "rotation_speed": 0.2,      # 200 deg/s
    "acceleration": 0.004,      # added once per thrusting tick
    "max_speed": 0.4,           # per axis
    "fire_speed": 0.5,
    "fire_cooldown": 250.0,
    "fire_lifetime": 1200.0,
    "ship_radius": 12.0,
    "projectile_radius": 2.0,
    "asteroid_radius": 40.0,
    "asteroid_speed": 0.05,     # velocity range is [-speed, speed] per axis
    "asteroid_count": 5,
}

# ==============================================================================
# GYMNASIUM DRIVER
# ==============================================================================

ENV_CONFIG = {
    "dt_ms": 1000 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_nearest": 5,
}

# Reward shaping for the headless driver
REWARD_CONFIG = {
    "R_ALIVE": 0.001,    # Small bonus per survived step
    "R_SHOT": 0.02,      # Penalty for shooting (encourage efficiency)
}

# ==============================================================================
# ARCADE WINDOW
# ==============================================================================

WINDOW_CONFIG = {
    "title": "Asteroids",
    "update_rate": 1 / 60,
}

# Axis names bound to arcade.key attribute names
KEYMAP_NAMES = {
    "LEFT": "left",
    "RIGHT": "right",
    "UP": "thrust",
    "SPACE": "shoot",
    "DOWN": "shield",
}

#!/usr/bin/env python3
# settings.py - Handles game settings

import json
import os
from pathlib import Path

from geometry import DEFAULT_ADDRESS, DEFAULT_PORT, GOAL_RADIUS, MAZE_H, MAZE_W, MOVE_SPEED

SETTINGS_FILE = "~/maze_duel/settings.json"

# Default settings values
DEFAULT_SETTINGS = {
    "MAZE_WIDTH": MAZE_W,
    "MAZE_HEIGHT": MAZE_H,
    "SEED": None,          # None draws a fresh maze each run
    "GOAL_PLACEMENT": "scan",
    "PORT": DEFAULT_PORT,
    "HOST_ADDRESS": DEFAULT_ADDRESS,
    "MOVE_SPEED": MOVE_SPEED,
    "GOAL_RADIUS": GOAL_RADIUS,
}


def load_settings(file_path=SETTINGS_FILE):
    """Load settings from a JSON file, filling in defaults for missing keys"""
    path = Path(os.path.expanduser(file_path))

    # Create directory if it doesn't exist
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        if path.exists():
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                print(f"Error loading settings: expected an object, got {type(data).__name__}")
                return dict(DEFAULT_SETTINGS)
            return {**DEFAULT_SETTINGS, **data}
        else:
            # Create default settings file if it doesn't exist
            save_settings(DEFAULT_SETTINGS, file_path)
            return dict(DEFAULT_SETTINGS)
    except (OSError, ValueError) as e:
        print(f"Error loading settings: {e}")
        return dict(DEFAULT_SETTINGS)


def save_settings(data, file_path=SETTINGS_FILE):
    """Save settings to a JSON file"""
    path = Path(os.path.expanduser(file_path))

    # Create directory if it doesn't exist
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
        print(f"Settings saved to {path}")
        return True
    except OSError as e:
        print(f"Error saving settings: {e}")
        return False

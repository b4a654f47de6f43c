"""
Configuration for the ASCII paint session.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Canvas
DEFAULT_PEN = os.getenv("PAINT_PEN", "*")
BLANK = " "

# History / persistence
DEFAULT_HISTORY_FILE = os.getenv("PAINT_HISTORY_FILE", "history.txt")
MAX_COMMAND_LENGTH = int(os.getenv("PAINT_MAX_COMMAND_LENGTH", "1000"))  # characters, newline excluded

# PNG export: pixel size of one grid cell
CELL_WIDTH = int(os.getenv("PAINT_CELL_WIDTH", "8"))
CELL_HEIGHT = int(os.getenv("PAINT_CELL_HEIGHT", "14"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "paint.log")

"""Configuration management for wordtally."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()  # "text" or "json"

# File Configuration
TEXT_ENCODING = os.getenv("TEXT_ENCODING", "utf-8")

# Extraction Configuration
SORT_TEXT_BLOCKS = os.getenv("SORT_TEXT_BLOCKS", "false").lower() in ("1", "true", "yes")

# Counting Configuration
MIN_WORD_LENGTH = 3  # shorter tokens are dropped

# Report Configuration
REPORT_WORD_WIDTH = 20
REPORT_COUNT_WIDTH = 3

"""Configuration management"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from hardman.exceptions import ConfigurationError

load_dotenv()

# Storage
DATA_PATH: Path = Path(os.getenv("HARDMAN_DATA_PATH", "./data"))
PREFS_FILE: Path = DATA_PATH / os.getenv("HARDMAN_PREFS_FILE", "hardman_prefs.json")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Voice & language
DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en-US")
DEFAULT_VOICE_VOLUME: float = float(os.getenv("DEFAULT_VOICE_VOLUME", "1.0"))
DEFAULT_SFX_VOLUME: float = float(os.getenv("DEFAULT_SFX_VOLUME", "0.7"))

# Timers (milliseconds)
MOTIVATION_INTERVAL_MS: int = int(os.getenv("MOTIVATION_INTERVAL_MS", "3000"))
MEMORY_MISMATCH_DELAY_MS: int = 600
MEMORY_RESET_DELAY_MS: int = 800
QUIZ_TICK_MS: int = 1000


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    for key, volume in (
        ("DEFAULT_VOICE_VOLUME", DEFAULT_VOICE_VOLUME),
        ("DEFAULT_SFX_VOLUME", DEFAULT_SFX_VOLUME),
    ):
        if not 0.0 <= volume <= 1.0:
            raise ConfigurationError(f"{key} must be between 0 and 1, got {volume}", config_key=key)
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {LOG_LEVEL}", config_key="LOG_LEVEL")
    if MOTIVATION_INTERVAL_MS <= 0:
        raise ConfigurationError("MOTIVATION_INTERVAL_MS must be positive", config_key="MOTIVATION_INTERVAL_MS")

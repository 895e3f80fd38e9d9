"""Shared constants for the rail fence home directory and artefact locations."""

RAILFENCE_HOME_EXT = ".railfence"  # user-level state/config directory suffix

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "railfence.log"

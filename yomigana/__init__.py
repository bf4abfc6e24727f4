import os

from dotenv import load_dotenv

load_dotenv()

# Request defaults (validated like explicit arguments when a request is built)
DEFAULT_TARGET = os.getenv("YOMIGANA_TARGET", "hiragana")
DEFAULT_MODE = os.getenv("YOMIGANA_MODE", "normal")
DEFAULT_ROMAJI_SYSTEM = os.getenv("YOMIGANA_ROMAJI_SYSTEM", "hepburn")
DEFAULT_DELIMITER_START = os.getenv("YOMIGANA_DELIMITER_START", "(")
DEFAULT_DELIMITER_END = os.getenv("YOMIGANA_DELIMITER_END", ")")

# Collaborator resources
USER_DICTIONARY = os.getenv("YOMIGANA_USER_DICT")
INCLUDE_NAMES = os.getenv("YOMIGANA_INCLUDE_NAMES", "1").lower() not in ("0", "false", "no")

LOG_LEVEL = os.getenv("YOMIGANA_LOG_LEVEL", "INFO").upper()

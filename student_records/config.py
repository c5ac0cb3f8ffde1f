# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - StorageConfig (dataclass)
#     data_file: str     (default "students.txt")
#     delimiter: str     (default ",")
#     encoding: str      (default "utf-8")
#
# - AppConfig (dataclass)
#     storage: StorageConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from student_records.config import get_config
#   config = get_config()
#   print(config.storage.data_file)
#
# ==============================================

import os
import string
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


FORBIDDEN_DELIMITERS = frozenset("\n\r.+-" + string.digits + string.ascii_letters)


@dataclass
class StorageConfig:
    """Backing file configuration."""
    data_file: str = "students.txt"
    delimiter: str = ","
    encoding: str = "utf-8"

    def __post_init__(self):
        # Rows are newline-terminated, and roll/marks are written with
        # digits, letters (e, inf, nan), ".", "+" and "-"
        if len(self.delimiter) != 1 or self.delimiter in FORBIDDEN_DELIMITERS:
            raise ValueError(
                f"Delimiter must be a single character that can't appear in a "
                f"line break or a number, got {self.delimiter!r}"
            )


@dataclass
class AppConfig:
    """Main application configuration."""
    storage: StorageConfig = field(default_factory=StorageConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    
    Raises:
        ValueError: If STUDENT_RECORDS_DELIMITER is not a single character
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    storage_config = StorageConfig(
        data_file=os.getenv("STUDENT_RECORDS_FILE", "students.txt"),
        delimiter=os.getenv("STUDENT_RECORDS_DELIMITER", ","),
        encoding=os.getenv("STUDENT_RECORDS_ENCODING", "utf-8")
    )
    
    _config_instance = AppConfig(storage=storage_config)
    
    return _config_instance

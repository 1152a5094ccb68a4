"""
Configuration management for the migration tracker CLI.
Handles loading and validating configuration from environment variables and files.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..processors.matcher import CustomerMatcher, DEFAULT_ACCEPT_THRESHOLD, DEFAULT_SEARCH_THRESHOLD
from ..processors.resolver import UNKNOWN_CUSTOMER_NAME

@dataclass
class Config:
    """Configuration settings for the migration tracker CLI."""

    # Database settings
    database_url: str

    # Customer matching settings
    fuzzy_search_threshold: float = DEFAULT_SEARCH_THRESHOLD
    fuzzy_accept_threshold: float = DEFAULT_ACCEPT_THRESHOLD
    unknown_customer_name: str = UNKNOWN_CUSTOMER_NAME

    # Input settings
    csv_encoding: str = 'utf-8'

    # Logging settings
    log_level: str = 'INFO'
    log_dir: Optional[Path] = None

    # Output settings
    output_format: str = 'text'  # text, json

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config: Configuration instance

        Raises:
            ValueError: If required environment variables are missing or malformed
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        database_url = os.getenv('DATABASE_URL')
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        try:
            search_threshold = float(os.getenv('FUZZY_SEARCH_THRESHOLD', str(DEFAULT_SEARCH_THRESHOLD)))
            accept_threshold = float(os.getenv('FUZZY_ACCEPT_THRESHOLD', str(DEFAULT_ACCEPT_THRESHOLD)))
        except ValueError as e:
            raise ValueError(f"Fuzzy thresholds must be numbers: {e}") from e

        return cls(
            database_url=database_url,
            fuzzy_search_threshold=search_threshold,
            fuzzy_accept_threshold=accept_threshold,
            unknown_customer_name=os.getenv('UNKNOWN_CUSTOMER_NAME', UNKNOWN_CUSTOMER_NAME),
            csv_encoding=os.getenv('CSV_ENCODING', 'utf-8'),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            log_dir=Path(os.getenv('LOG_DIR')) if os.getenv('LOG_DIR') else None,
            output_format=os.getenv('OUTPUT_FORMAT', 'text')
        )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            bool: True if configuration is valid

        Raises:
            ValueError: Describing the first invalid setting
        """
        # Validate log directory exists if specified
        if self.log_dir and not self.log_dir.exists():
            try:
                self.log_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ValueError(f"Failed to create log directory: {e}") from e

        if not 0.0 <= self.fuzzy_accept_threshold <= self.fuzzy_search_threshold <= 1.0:
            raise ValueError(
                "Fuzzy thresholds must satisfy 0 <= FUZZY_ACCEPT_THRESHOLD <= FUZZY_SEARCH_THRESHOLD <= 1"
            )

        if not self.unknown_customer_name.strip():
            raise ValueError("unknown_customer_name must not be blank")

        # Validate output format
        valid_formats = ['text', 'json']
        if self.output_format not in valid_formats:
            raise ValueError(f"output_format must be one of: {', '.join(valid_formats)}")

        return True

    def build_matcher(self) -> CustomerMatcher:
        """Matcher configured with this config's thresholds."""
        return CustomerMatcher(
            search_threshold=self.fuzzy_search_threshold,
            accept_threshold=self.fuzzy_accept_threshold
        )

    @property
    def log_file(self) -> Optional[Path]:
        """File that log output is mirrored to, when a log directory is set."""
        return self.log_dir / 'migration-tracker.log' if self.log_dir else None

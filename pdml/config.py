#!/usr/bin/env python3
from dataclasses import dataclass
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_OUTPUT_FORMAT = "json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Config:
    """PDML configuration"""
    source_encoding: str = os.getenv("PDML_SOURCE_ENCODING", "utf-8")
    output_format: str = os.getenv("PDML_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT).lower()
    log_level: str = os.getenv("PDML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    enable_debug: bool = os.getenv("PDML_DEBUG", "false").lower() in ["true", "1", "yes"]

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            logger.warning(
                f"PDML_OUTPUT_FORMAT must be one of {OUTPUT_FORMATS}, got {self.output_format!r}; "
                f"using {DEFAULT_OUTPUT_FORMAT}"
            )
            self.output_format = DEFAULT_OUTPUT_FORMAT
        # getLevelName maps known names to ints and unknown ones to "Level X"
        if not isinstance(logging.getLevelName(self.log_level), int):
            logger.warning(f"Unknown PDML_LOG_LEVEL {self.log_level!r}; using {DEFAULT_LOG_LEVEL}")
            self.log_level = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from the current environment"""
        return cls(
            source_encoding=os.getenv("PDML_SOURCE_ENCODING", "utf-8"),
            output_format=os.getenv("PDML_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT).lower(),
            log_level=os.getenv("PDML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            enable_debug=os.getenv("PDML_DEBUG", "false").lower() in ["true", "1", "yes"],
        )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug else self.log_level

config = Config()

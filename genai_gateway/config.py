"""
Configuration management for the GenAI gateway.
"""

import os
from typing import Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Output encoding and framing for generated images
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "1:1"


def _api_key_from_env() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")


@dataclass
class GeminiConfig:
    """Google Gemini API configuration."""

    api_key: str = field(default_factory=_api_key_from_env)
    text_model: str = field(
        default_factory=lambda: os.getenv("TEXT_MODEL", "gemini-2.5-flash")
    )
    image_model: str = field(
        default_factory=lambda: os.getenv("IMAGE_MODEL", "imagen-4.0-generate-001")
    )
    # Model used for image editing (multi-modal output)
    image_edit_model: str = field(
        default_factory=lambda: os.getenv(
            "IMAGE_EDIT_MODEL", "gemini-2.5-flash-image-preview"
        )
    )
    image_mime_type: str = IMAGE_MIME_TYPE
    aspect_ratio: str = IMAGE_ASPECT_RATIO


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )
    file_path: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE_PATH"))


@dataclass
class Config:
    """Main configuration class."""

    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> bool:
        """Validate configuration settings."""
        errors = []

        if not self.gemini.api_key:
            errors.append("Gemini API key is required")

        if self.logging.level.upper() not in (
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ):
            errors.append(f"Unknown log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        return True


# Global configuration instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config


def reload_config() -> Config:
    """Reload configuration from environment variables."""
    global config
    load_dotenv(override=True)
    config = Config()
    return config

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseModel):
    """Settings for the form template catalog."""

    # Catalog data
    catalog_path: Optional[Path] = Field(
        default=None,
        description="JSON catalog file; the packaged insurance catalog is used when unset",
    )


class MatchingSettings(BaseModel):
    """Settings for free-text intent matching."""

    # Signal weights
    keyword_weight: float = Field(default=0.3, description="Confidence added per matched keyword")
    pattern_weight: float = Field(default=0.4, description="Confidence added per matched pattern rule")
    id_bonus: float = Field(default=0.5, description="Confidence added when the template id is named")

    # Filtering
    confidence_threshold: float = Field(default=0.2, description="Candidates at or below this score are dropped")
    max_results: int = Field(default=3, description="Default number of suggestions returned")

    @field_validator("confidence_threshold")
    @classmethod
    def threshold_in_range(cls, v):
        """The threshold is compared against a confidence capped at 1.0."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("confidence_threshold must be between 0 and 1")
        return v


class DiscoverySettings(BaseModel):
    """Settings for the guided discovery questionnaire."""

    default_suggestion: Optional[str] = Field(
        default=None,
        description="Template suggested when discovery answers match nothing; the engine default when unset",
    )


class ValidationSettings(BaseModel):
    """Settings for answer validation."""

    date_format: Literal["iso", "us"] = Field(
        default="iso", description="Canonical date format (iso: YYYY-MM-DD, us: MM/DD/YYYY)"
    )
    enforce_numeric_bounds: bool = Field(
        default=False, description="Reject numeric answers outside the declared minimum/maximum"
    )


class DocumentSettings(BaseModel):
    """Settings for the PDF documents that back each template."""

    forms_dir: Path = Field(default=Path("forms"), description="Directory containing <template-id>.pdf files")
    sample_pages: int = Field(default=1, description="Pages read for a text layer when classifying form PDFs")


class LoggingSettings(BaseModel):
    """Settings for logging configuration."""

    # Log level
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    # Log files
    log_file: Optional[Path] = Field(default=None, description="Log file path")
    log_file_level: str = Field(default="DEBUG", description="Log file level")
    max_log_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, description="Number of log file backups")

    # Console logging
    console_logging: bool = Field(default=True, description="Enable console logging")
    console_log_level: str = Field(default="INFO", description="Console log level")

    @field_validator("log_level", "log_file_level", "console_log_level")
    @classmethod
    def normalise_level(cls, v):
        return v.upper()


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(default="development", description="Environment (development, staging, production)")

    # Configuration sections
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Override settings based on environment
        if self.environment == "production":
            self.logging.log_level = "WARNING"
        elif self.environment == "staging":
            self.logging.log_level = "INFO"
        elif "log_level" not in self.logging.model_fields_set:  # development
            self.logging.log_level = "DEBUG"


# Global settings instance
settings = Settings()

# Convenience imports for easy access
__all__ = [
    "Settings",
    "CatalogSettings",
    "MatchingSettings",
    "DiscoverySettings",
    "ValidationSettings",
    "DocumentSettings",
    "LoggingSettings",
    "settings",
]

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vme_decoder.model.enum.output_format_enum import OutputFormat


class OutputConfig(BaseModel):
    """Output rendering configuration"""

    FORMAT: OutputFormat = Field(default=OutputFormat.TEXT, description="Output format (text/json)")
    SHOW_INDEX: bool = Field(default=False, description="Prefix each line with the word index")
    UNRECOGNIZED_LABEL: str = Field(
        default="unrecognized", min_length=1, description="Descriptor for words matching no known pattern"
    )

    @field_validator("FORMAT", mode="before")
    @classmethod
    def _normalize_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("UNRECOGNIZED_LABEL", mode="before")
    @classmethod
    def _strip_label(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    LEVEL: str = Field(default="WARNING", description="Log level name")
    LOG_TO_FILE: bool = Field(default=False, description="Also write logs to a rotating file")
    LOG_DIR: str = Field(default="logs", description="Log directory")

    @field_validator("LEVEL", mode="before")
    @classmethod
    def _validate_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def level_no(self) -> int:
        return logging.getLevelName(self.LEVEL)


class DecoderConfig(BaseModel):
    """Decoder configuration (full)"""

    model_config = ConfigDict(extra="ignore")

    OUTPUT: OutputConfig = Field(default_factory=OutputConfig)
    LOGGING: LoggingConfig = Field(default_factory=LoggingConfig)

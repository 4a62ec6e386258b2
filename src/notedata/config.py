import logging
from typing import Literal, TextIO
import structlog
import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]
LogFormat = Literal["text", "json"]

# handle behind the current structlog factory when logging to a file
_log_file: TextIO | None = None


class Config(BaseSettings):
    log_level: LogLevel = pydantic.Field(
        "info",
        description="Logging level.",
    )
    log_file: str = pydantic.Field(
        "STDOUT",
        description="Path to the log file, or STDOUT.",
    )
    log_format: LogFormat = pydantic.Field(
        "text",
        description="Log format, text or json.",
    )
    model_config = SettingsConfigDict(env_prefix="notedata_")

    @pydantic.field_validator("log_level", "log_format", mode="before")
    @classmethod
    def lowercase(cls, value):
        return value.lower() if isinstance(value, str) else value


def _logger_factory(log_file: str) -> structlog.PrintLoggerFactory:
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if log_file == "STDOUT":
        return structlog.PrintLoggerFactory()
    _log_file = open(log_file, "a")
    return structlog.PrintLoggerFactory(file=_log_file)


def load_config(**overrides) -> Config:
    """
    Build a Config from the environment plus overrides and point structlog at it.

    Raises pydantic.ValidationError for an unknown level or format.
    Reconfiguring closes the log file opened by the previous call.
    """
    config = Config(**overrides)
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(),
    ]
    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level.upper())
        ),
        logger_factory=_logger_factory(config.log_file),
    )
    return config

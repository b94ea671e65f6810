import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Dataclass for logging configuration.
    """

    level: str
    rotation: str
    retention: int
    log_reply_text: bool
    reply_preview_chars: int


@dataclass(frozen=True)
class PathConfig:
    """
    Dataclass for path configuration.
    """

    logs: Path


def load_logging_env() -> LoggingConfig:
    """
    Loads logging configuration from environment variables or defaults.

    Returns:
        LoggingConfig: Dataclass containing logging configuration.
        - level (str): Minimum level for the console sink.
        - rotation (str): Log file rotation policy.
        - retention (int): Number of rotated log files to keep.
        - log_reply_text (bool): Whether reply logs include a text preview.
        - reply_preview_chars (int): Maximum length of a reply text preview.
    """
    return LoggingConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        rotation=os.getenv("LOG_ROTATION", "5 MB"),
        retention=int(os.getenv("LOG_RETENTION", "3")),
        log_reply_text=_as_bool(os.getenv("LOG_REPLY_TEXT"), False),
        reply_preview_chars=int(os.getenv("LOG_REPLY_PREVIEW_CHARS", "80")),
    )


def load_path_env() -> PathConfig:
    """
    Loads path configuration from environment variables or defaults.

    Returns:
        PathConfig: Dataclass containing path configuration.
        - logs (Path): Path to the log file.
    """
    project_root: Path = Path(__file__).parents[2].resolve()
    return PathConfig(
        logs=Path(
            os.getenv("LOG_PATH", project_root / ".logs" / "botcontext.log")
        ).expanduser(),
    )

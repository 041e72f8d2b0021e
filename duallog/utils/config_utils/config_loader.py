"""Utility to build the logger settings from environment variables (and .env)"""
from dataclasses import dataclass
from typing import Optional
from duallog.utils.config_utils.env_loader import get_env_var, get_env_flag, load_env_file

COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class LoggerConfig:
    color_mode: str = "auto"
    log_dir: Optional[str] = None
    debug: bool = False

    def __post_init__(self):
        if self.color_mode not in COLOR_MODES:
            raise ValueError(
                f"Invalid color mode '{self.color_mode}', expected one of {', '.join(COLOR_MODES)}"
            )


# -------------------------------Read the color mode for console output-------------------------------
def get_color_mode() -> str:
    return get_env_var("DUALLOG_COLOR", required=False, default="auto").strip().lower()


# -------------------------------Read the optional directory for log files-------------------------------
def get_log_dir() -> Optional[str]:
    log_dir = get_env_var("DUALLOG_LOG_DIR", required=False)
    return log_dir or None


# -------------------------------Build the config from the environment-------------------------------
def load_logger_config() -> LoggerConfig:
    load_env_file()
    return LoggerConfig(
        color_mode=get_color_mode(),
        log_dir=get_log_dir(),
        debug=get_env_flag("DUALLOG_DEBUG"),
    )

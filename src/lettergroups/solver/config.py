"""Word group solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the word group solver."""

    strategy: Literal["tree", "naive"] = "tree"
    """Search strategy: ranked-trie canonical enumeration or naive brute force. Default: tree."""

    max_workers: int | None = Field(default=None, ge=1)
    """Number of worker threads. If None (default), uses os.cpu_count()."""

    separator: str = ", "
    """Separator placed between the words of one output line. Default: ", "."""

    report_interval: int = Field(default=0, ge=0)
    """Interval (in number of roots searched) at which each worker reports progress.

    0 (default) disables progress reports.
    """

    isolate_worker_errors: bool = True
    """Whether a failing worker is reported and skipped rather than failing the whole run.

    Default: True.
    """

    log_file: str | None = None
    """Path of the diagnostics log. If None (default), diagnostics go to stderr."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="LETTERGROUPS_",
        extra="ignore",
    )


config = SolverConfig()

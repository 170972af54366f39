"""Configuration management for Git Fame."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import ConfigurationError

ORDER_KEYS = ("lines", "commits", "files")
OUTPUT_FORMATS = ("tabular", "csv", "json", "json-lines")


@dataclass(frozen=True)
class FameConfig:
    """Immutable settings for one attribution run."""

    # Repository selection
    repository: str = "."
    revision: str = "HEAD"

    # Ranking and identity
    order_by: str = "lines"
    use_committer: bool = False

    # Output options
    output_format: str = "tabular"

    # Path filters
    extensions: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    restrict_to: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.order_by not in ORDER_KEYS:
            raise ConfigurationError("order-by", self.order_by, list(ORDER_KEYS))
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError("format", self.output_format, list(OUTPUT_FORMATS))

    @property
    def identity_field(self) -> str:
        """Name of the blame field used as contributor identity."""
        return "committer" if self.use_committer else "author"

    @property
    def git_env(self) -> Dict[str, str]:
        """Get Git environment variables for deterministic output."""
        env = os.environ.copy()

        # Use platform-appropriate null device
        null_device = "NUL" if os.name == "nt" else "/dev/null"

        env.update(
            {
                "LC_ALL": "C",
                "GIT_CONFIG_GLOBAL": null_device,
                "GIT_CONFIG_SYSTEM": null_device,
                "GIT_TERMINAL_PROMPT": "0",
                "GIT_ASKPASS": "echo",
                "SSH_ASKPASS": "echo",
            }
        )
        return env

    def to_summary_dict(self) -> Dict[str, Any]:
        """Describe the run for API responses and debug logs."""
        return {
            "repository": self.repository,
            "revision": self.revision,
            "order_by": self.order_by,
            "identity": self.identity_field,
            "filters": {
                "extensions": list(self.extensions),
                "languages": list(self.languages),
                "exclude": list(self.exclude),
                "restrict_to": list(self.restrict_to),
            },
        }

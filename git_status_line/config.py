"""Configuration handling for git-status-line"""

from dataclasses import dataclass

from git_status_line.constants import OUTPUT_FORMATS, UNTRACKED_FILES_MODES, OutputFormat


@dataclass
class Config:
    """Configuration for git-status-line with validation."""

    # Rendering
    output_format: str = OutputFormat.BRANCH  # branch, flags

    # Options passed through to `git status`
    show_ignored: bool = False
    untracked_files: str = "all"  # all, normal, no

    # Diagnostics
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_output_format()
        self._validate_untracked_files()

    def _validate_output_format(self):
        """Validate output_format is one of allowed values."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got '{self.output_format}'"
            )

    def _validate_untracked_files(self):
        """Validate untracked_files is one of allowed values."""
        if self.untracked_files not in UNTRACKED_FILES_MODES:
            raise ValueError(
                f"untracked_files must be one of {UNTRACKED_FILES_MODES}, "
                f"got '{self.untracked_files}'"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "output_format": self.output_format,
            "show_ignored": self.show_ignored,
            "untracked_files": self.untracked_files,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key, so services can take a Config or a dict."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "output_format",
            "show_ignored",
            "untracked_files",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

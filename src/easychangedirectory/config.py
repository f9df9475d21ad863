"""Configuration loading and defaults for easychangedirectory."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def get_config_dir() -> Path:
    """Get the easychangedirectory config directory (XDG-style)."""
    return Path.home() / ".config" / "easychangedirectory"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for the log file."""
    return Path.home() / ".local" / "share" / "easychangedirectory"


@dataclass
class Config:
    """Application configuration."""

    show_hidden: bool = True
    show_pwd: bool = False
    log: bool = False
    data_directory: Path = field(default_factory=lambda: get_default_data_dir())

    def get_log_path(self) -> Path:
        """Get the log file path based on configured data directory."""
        return self.data_directory / "ed.log"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        data_dir = data.get("data_directory", str(get_default_data_dir()))

        return cls(
            show_hidden=data.get("show_hidden", True),
            show_pwd=data.get("show_pwd", False),
            log=data.get("log", False),
            data_directory=Path(data_dir).expanduser(),
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# easychangedirectory Configuration',
            '',
            '# Show dotfiles in the panes',
            f'show_hidden = {str(self.show_hidden).lower()}',
            '',
            '# Print "Now: <path>" after the navigator exits',
            f'show_pwd = {str(self.show_pwd).lower()}',
            '',
            '# Write a debug log to <data_directory>/ed.log',
            f'log = {str(self.log).lower()}',
            '',
            '# Directory for the log file',
            '# Default: ~/.local/share/easychangedirectory',
            f'data_directory = "{self.data_directory}"',
        ]

        config_path.write_text("\n".join(lines) + "\n")

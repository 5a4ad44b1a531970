"""Core data models for servedir."""

from dataclasses import dataclass, field
from pathlib import Path

# Valid log level names
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class ServedRoot:
    """The directory beyond which no response content may originate."""

    path: Path  # Absolute, canonical directory path

    @classmethod
    def from_path(cls, path: Path | str) -> "ServedRoot":
        """
        Canonicalize a directory into a served root.

        Args:
            path: Directory to serve, relative or absolute

        Returns:
            ServedRoot wrapping the symlink-free absolute path

        Raises:
            ValueError: If the path does not exist or is not a directory
        """
        try:
            canonical = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ValueError(f"Path does not exist: {path}") from e

        if not canonical.is_dir():
            raise ValueError(f"Not a directory: {path}")

        return cls(path=canonical)

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class ServerConfig:
    """Configuration for web server."""

    host: str = "0.0.0.0"  # Bind address
    port: int = 8080  # Port number
    served_root: Path = field(default_factory=lambda: Path("."))  # Directory to serve
    compress: bool = False  # Wrap responses in gzip middleware
    compress_min_size: int = 500  # Smallest body worth compressing, in bytes
    log_level: str = "INFO"  # Logging level

    def validate(self) -> None:
        """Validate configuration values."""
        if not (1024 <= self.port <= 65535):
            raise ValueError("Port must be 1024-65535")
        if not self.served_root.exists():
            raise ValueError(f"Path does not exist: {self.served_root}")
        if not self.served_root.is_dir():
            raise ValueError(f"Not a directory: {self.served_root}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if self.compress_min_size < 0:
            raise ValueError("Compression minimum size must not be negative")

    def root(self) -> ServedRoot:
        """Build the canonical served root for this configuration."""
        return ServedRoot.from_path(self.served_root)

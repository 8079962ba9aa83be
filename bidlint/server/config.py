"""Server-side access to the shared runtime settings."""

from ..config import DEFAULT_MAX_PAYLOAD_BYTES, Settings, get_settings

__all__ = ["DEFAULT_MAX_PAYLOAD_BYTES", "Settings", "get_settings"]

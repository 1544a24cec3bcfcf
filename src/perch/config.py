"""Server bridge configuration.

ServerConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server bridge configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(max_content_length=1024 * 1024, expose_errors=False)
    """

    # Limits
    max_content_length: int = 16 * 1024 * 1024  # 16 MB

    # Faults: 500 bodies carry the error message unless disabled
    expose_errors: bool = True

    # Development: 500 bodies carry the full traceback
    debug: bool = False

"""Test utilities for perch applications.

Provides an ASGI test client and an in-memory transport request::

    from perch.testing import MemoryRequest, TestClient
"""

from perch.testing.client import TestClient
from perch.testing.transport import MemoryRequest

__all__ = [
    "MemoryRequest",
    "TestClient",
]

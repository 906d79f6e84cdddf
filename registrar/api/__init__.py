"""
API module with the REST adapter and its seeding client.
"""

from .rest_api import RegistrarRestAPI
from .client import RegistrarClient

__all__ = [
    "RegistrarRestAPI",
    "RegistrarClient",
]

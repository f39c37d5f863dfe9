"""Gateway to the hosted auth/DB service."""

from .client import BackendClient, BackendRequestError, Profile
from .results import Result, Success, Unavailable

__all__ = [
    "BackendClient",
    "BackendRequestError",
    "Profile",
    "Result",
    "Success",
    "Unavailable",
]

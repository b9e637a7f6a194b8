"""
Import all models from their respective modules.
"""

from rentx.models.user import User
from rentx.models.listing import Listing

__all__ = [
    "User",
    "Listing",
]

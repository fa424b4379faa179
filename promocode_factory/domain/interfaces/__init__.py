"""
Domain Interfaces (Ports)
"""

from .repositories import PartnerRepository

__all__ = [
    "PartnerRepository",
]

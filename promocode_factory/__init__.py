"""
Promo Code Factory - Partner Promo Code Limit Service

A FastAPI-based microservice that manages partners and the limits
on how many promo codes each partner may issue.
"""

__version__ = "0.1.0"

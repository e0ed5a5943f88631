"""
Top‑level API router.

Paths are part of the bank's public contract (``/cctransactions`` and
``/health``) and are therefore mounted without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import health, transactions

router = APIRouter()

router.include_router(transactions.router, prefix="/cctransactions", tags=["cctransactions"])
router.include_router(health.router, prefix="/health", tags=["health"])

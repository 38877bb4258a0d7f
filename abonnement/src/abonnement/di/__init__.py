"""Dependency injection."""

from abonnement.di.container import DIContainer

__all__ = [
    "DIContainer",
]

"""
Monitoring and observability infrastructure.
"""

from abonnement.infrastructure.monitoring.logger import (
    get_logger,
    get_operation_id,
    operation_context,
    set_operation_id,
    setup_logging,
)

__all__ = [
    "get_logger",
    "get_operation_id",
    "operation_context",
    "set_operation_id",
    "setup_logging",
]

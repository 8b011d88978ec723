"""
Services module exports.
"""

# Kanban board
from .kanban import build_board, count_by_status, to_board_card

# Integration sync
from .integrations import IntegrationSyncService, integration_sync_service

__all__ = [
    'build_board',
    'count_by_status',
    'to_board_card',
    'IntegrationSyncService',
    'integration_sync_service'
]

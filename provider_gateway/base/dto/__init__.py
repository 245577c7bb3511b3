"""Validated inbound DTOs for the service layer."""

from .chat import ChatBodyDTO, HistoryItemDTO

__all__ = ["ChatBodyDTO", "HistoryItemDTO"]

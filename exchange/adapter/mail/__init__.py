"""Outbound email adapters."""

from .client import MockEmailSender, RealEmailSender

__all__ = ["MockEmailSender", "RealEmailSender"]

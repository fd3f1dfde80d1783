"""
Protocols for type safety.

This package provides protocols that define the capability interfaces
consumed by the relay, enabling type checking without inheritance.
"""

from .collaborators import AuditStore, EmailSender, ObjectStore, SecretStore

__all__ = ["SecretStore", "ObjectStore", "EmailSender", "AuditStore"]

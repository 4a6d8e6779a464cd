"""
This file ensures that all models are imported and registered with SQLAlchemy
when the application context is created. This is crucial for tools like
Flask-Migrate to detect all tables correctly.
"""
from .user import User
from .company import Company
from .document import Document
from .accounting import AccountingEntry, EntryType

__all__ = ["User", "Company", "Document", "AccountingEntry", "EntryType"]

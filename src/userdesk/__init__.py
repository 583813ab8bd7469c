"""Userdesk - role management and transactional email backend."""

__version__ = "0.1.0"

"""Service layer for meal events, menus, meal requests, comments, addresses and notifications."""

__version__ = "0.1.0"
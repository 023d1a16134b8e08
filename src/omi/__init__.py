"""OMI - video streaming demo backend.

Core package with the engagement domain (favorites, ratings, comments),
the application layer orchestrating it, persistence adapters and the
HTTP/CLI presentation. Identity concerns live in omi_identity.
"""

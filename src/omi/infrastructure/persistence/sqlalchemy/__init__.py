"""SQLAlchemy persistence for the omi domain."""

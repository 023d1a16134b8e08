"""Identity application layer: use-case services, ports and request context."""

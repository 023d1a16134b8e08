"""Identity persistence adapters."""

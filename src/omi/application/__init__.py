"""Application layer: commands, queries and repository factory protocol."""

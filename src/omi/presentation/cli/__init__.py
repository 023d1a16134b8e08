"""Command line interface for the OMI backend."""

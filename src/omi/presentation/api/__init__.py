"""FastAPI application for the OMI backend."""

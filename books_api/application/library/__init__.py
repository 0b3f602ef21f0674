"""Application layer for the library bounded context."""

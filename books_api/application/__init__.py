"""Application layer: use cases, repository protocols and query descriptors."""

"""Infrastructure layer: persistence, API schemas and HTTP routers."""

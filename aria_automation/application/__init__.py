"""Application layer: commands and the handlers that orchestrate them."""

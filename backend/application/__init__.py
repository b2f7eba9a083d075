"""Application layer: commands, queries and orchestrators."""

"""Core services: artifact registry, filters, skip collection, run context."""

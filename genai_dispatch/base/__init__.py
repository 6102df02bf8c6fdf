"""Core dispatch layer: service types, resolution, adapters, errors, transport."""

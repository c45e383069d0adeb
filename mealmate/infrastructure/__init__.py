"""Infrastructure layer: configuration, persistence and event adapters."""

"""Core infrastructure: configuration, logging, the record store and error handling."""

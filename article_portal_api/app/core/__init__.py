"""Core infrastructure: settings, logging, MongoDB handle and digests."""

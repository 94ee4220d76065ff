"""Infrastructure: persistence backends and cryptography providers."""

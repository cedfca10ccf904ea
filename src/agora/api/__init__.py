"""HTTP API for Agora."""

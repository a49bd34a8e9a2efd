"""HTTP decision service."""

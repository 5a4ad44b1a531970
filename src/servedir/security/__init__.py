"""Request path resolution."""

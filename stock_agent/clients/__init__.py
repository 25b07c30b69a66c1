"""Model service clients."""

"""ReviewLens CLI."""

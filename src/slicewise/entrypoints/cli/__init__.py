"""Command-line interface for SLICEWISE."""

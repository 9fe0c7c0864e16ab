"""Configuration and logging shared by the analysis modules."""

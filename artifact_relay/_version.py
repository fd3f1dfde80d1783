"""Version information for artifact-relay."""

__version__ = "1.0.0"

"""Football statistics registry illustrating the singleton and observer patterns."""
__version__ = "1.0.0"

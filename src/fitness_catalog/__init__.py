"""fitness-catalog: exercise, workout and training plan catalog service."""

__version__ = "0.1.0"

"""birdlog - species name resolution for a personal bird-observation logbook."""

__version__ = "0.3.0"

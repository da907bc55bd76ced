"""Core token handling: references, inversion, resolution, storage, builds."""

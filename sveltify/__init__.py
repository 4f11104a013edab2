"""Convert React function components into Svelte 5 components."""

__version__ = "0.1.0"

__all__ = ["__version__"]
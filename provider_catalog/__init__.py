"""Generate the catwalk provider config for APIpie with cached display names."""

__version__ = "0.1.0"

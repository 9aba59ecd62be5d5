"""Weekly weather forecast and estimated energy page rendered from a JSON weather API."""

__version__ = "0.1.0"
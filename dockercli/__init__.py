"""Command-line client front-end for a container daemon."""

__version__ = '0.0.0.dev0'

# Daemon API version the client speaks.
API_VERSION = '1.14'

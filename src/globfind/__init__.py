"""globfind: recursive file finder with glob name and content filters."""

__version__ = "0.1.0"

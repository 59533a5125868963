"""Unit conversion across eighteen measurement modes, with a command-line converter and a build counter."""

__version__ = "1.8.0"
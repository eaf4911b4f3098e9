"""Generate third-party SDK utility files with a hosted chat-completion model."""

__version__ = "0.1.0"

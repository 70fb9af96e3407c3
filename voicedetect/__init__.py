"""Voice detection client: submit an audio clip, get a human / AI verdict."""

__version__ = "0.1.0"

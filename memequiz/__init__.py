"""Backend for the meme-captioning quiz game."""

__version__ = "1.0.0"

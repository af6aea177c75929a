"""A mouse-steered snake arcade game with coloured fruit, an AI mode and a settings screen."""

__version__ = "0.1.0"
"""A lumberjack arcade game and the small pygame scene framework it runs on."""

__version__ = "0.1.0"
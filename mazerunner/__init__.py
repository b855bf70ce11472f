"""Generate, build and solve block mazes in a Minecraft world."""

__version__ = "0.1.0"
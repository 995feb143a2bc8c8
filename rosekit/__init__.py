"""Asset packages, animation files, projects, reflection, events and trees for a small 2D game engine."""

__version__ = "0.1.0"
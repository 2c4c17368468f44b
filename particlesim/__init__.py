"""Two-dimensional particle simulation with gravity, friction, wall bounces and disc collisions."""

__version__ = "0.1.0"
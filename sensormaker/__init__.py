"""sensormaker -- generate sensor projects from JSON sensor schemas."""

__version__ = "0.1.0"

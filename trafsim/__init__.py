"""Grid tiles, roads, traffic lights, buildings, cars and a day clock for a traffic simulation."""

__version__ = "0.1.0"
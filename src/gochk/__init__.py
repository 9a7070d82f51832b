"""gochk — layered-architecture dependency checker for Go source trees."""

__version__ = "0.1.0"

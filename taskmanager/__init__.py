"""Task Manager: in-memory task tracking API and client."""

__version__ = "0.1.0"

"""Persistence for the shared content document."""

from content_robot.state.store import JsonStateStore

__all__ = ["JsonStateStore"]

"""Shared pytest fixtures for the book service tests."""

from .core import *  # noqa: F401,F403

"""CLI package for BookTracker"""
from .main import cli

__all__ = ['cli']

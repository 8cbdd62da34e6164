"""CLI package for Elise Reads"""
from .main import cli

__all__ = ['cli']

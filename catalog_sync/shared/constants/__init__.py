"""
Application constants for the catalog sync library
"""

from . import app, catalog
from .app import *
from .catalog import *

__all__ = app.__all__ + catalog.__all__

# fakeso/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .common import *
from .user import *
from .message import *
from .question import *

"""Version information for conlog.

Single source for the package version; setup.py reads __version__
from this file without importing the package.
"""

__version__ = "0.1.0a0"
__app_name__ = "conlog"

"""
Responsive Text

Converts a salience-scored CSV of tokens into a single static HTML page
that reveals progressively more tokens as the viewport widens.
"""

__version__ = "0.1.0"
__author__ = "Responsive Text Team"

from responsive_text.config import Config

__all__ = ["Config", "__version__"]

"""
chromasync: render color blueprints (config templates) from a colorscheme.

Colorscheme (JSON) → ColorTable → TemplateRenderer → rendered files → post script
"""

__version__ = "0.1.0"

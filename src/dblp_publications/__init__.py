"""dblp-publications: render a researcher's DBLP publication list."""

__version__ = "0.1.0"

"""Portfolio site loader: populates static page shells from JSON data files."""

__version__ = '1.0.0'

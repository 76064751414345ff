"""In-memory task board with a web page and a console front end."""

__version__ = "0.1.0"

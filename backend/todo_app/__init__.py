"""Todo lists data-access layer: users, todo lists and todos over two storage strategies."""

__version__ = "0.1.0"

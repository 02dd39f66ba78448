"""Qt (PyQt5) presentation layer."""

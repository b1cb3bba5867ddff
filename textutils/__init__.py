"""
Small re-implementations of classic Unix text and file tools.

Each tool is a module with a main() entry point and can be run as
`python -m textutils.<tool>` or through the `textutils` launcher.
"""

__version__ = "0.1.0"

"""
Constants for the noray package.
"""

# Top-level logger namespaces of the package
PACKAGE_LOGGERS = ("domain", "utils")

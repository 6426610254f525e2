"""springgen -- Spring Boot three-layer project scaffolder."""

__version__ = "0.1.0"

"""Customer.io workflow node: maps node parameters onto Customer.io API calls."""

__version__ = "0.1.0"

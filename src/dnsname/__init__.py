"""dnsname — validated DNS domain-name values."""

__version__ = "0.1.0"

"""Tenant admin console — list controllers and REST clients for the admin API."""

__version__ = "0.1.0"

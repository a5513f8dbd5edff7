"""
Braintree Gateway - Transaction API Client

An async client for the Braintree transaction resource that maps
gateway responses into typed records and normalizes API errors.
"""

__version__ = "0.1.0"

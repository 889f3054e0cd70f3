"""
Version 1 of the API.

Bundles the user and workout endpoints together with the dependency
providers that build their services.
"""

"""
conduit - User registration pipeline.

Validates registration input, persists the account and issues a signed
session token. See ``conduit.domain`` for the core and
``conduit.dependencies`` for production wiring.
"""

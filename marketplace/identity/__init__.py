"""Credential verification and token issuance."""

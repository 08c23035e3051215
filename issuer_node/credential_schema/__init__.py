"""Credential JSON schema loading, inspection and attribute conversion."""

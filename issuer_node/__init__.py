"""Issuer node credential schema and database utilities."""

"""CLI command modules for the envx entry point (see main.py)."""

"""Command-line interface for SUBSCRIBEANDSAVE."""

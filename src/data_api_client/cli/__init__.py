"""Command line interface for data-api-client."""

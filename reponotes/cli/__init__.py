"""Command line interface for reponotes."""

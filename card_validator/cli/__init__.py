"""
Command-line interface for the card validator.
"""

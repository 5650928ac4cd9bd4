"""ROOMKEEPER command-line interface."""

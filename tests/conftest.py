"""Global pytest fixtures for ROOMKEEPER."""

pytest_plugins = [
    "tests.fixtures.rooms",
    "tests.fixtures.sqlite",
]

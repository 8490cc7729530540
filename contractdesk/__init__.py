"""Users, contracts, validation, storage and interactive menus for managing them."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "controllers",
    "entities",
    "mediator",
    "notifications",
    "reports",
    "repositories",
    "validation",
]
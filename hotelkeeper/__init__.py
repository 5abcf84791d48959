"""Hotel guests, room stays, bookable resources and a guest-list command."""

__version__ = "0.1.0"
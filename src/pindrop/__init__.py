"""PinDrop: DIGIPIN and WorldPIN grid geocode service."""

__version__ = "0.1.0"

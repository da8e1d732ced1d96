"""Error hierarchy for the penguins scene."""


class PenguinsError(Exception):
    """Base for all penguins errors."""

    pass


class ConfigError(PenguinsError):
    """config.json is missing, unreadable or incomplete."""

    pass


class AssetLoadError(PenguinsError):
    """An image asset could not be loaded or substituted."""

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not load asset '{name}': {reason}")

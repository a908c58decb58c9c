from __future__ import annotations


class ACOError(ValueError):
    """Base class for errors raised before a colony run starts."""


class InvalidInputError(ACOError):
    """Cities or distance matrix do not define a tour (fewer than 2 cities, bad shape)."""


class ConfigurationError(ACOError):
    """ACOConfig values that would make the pheromone dynamics meaningless."""

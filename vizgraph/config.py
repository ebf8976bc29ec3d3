"""Configuration classes for vizgraph components."""

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Defaults for random graph generation."""

    # Bounds for the number of generated nodes (inclusive)
    min_nodes: int = 5
    max_nodes: int = 20

    # Each node emits between 1 and max_links links
    max_links: int = 3

    # Length of generated node names
    name_length: int = 6


# Global configuration instance
GENERATOR_CONFIG = GeneratorConfig()

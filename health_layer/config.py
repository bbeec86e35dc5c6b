"""Configuration dataclasses for health rendering."""

from dataclasses import dataclass


@dataclass
class HealthConfig:
    """Controls how a Health is rendered into its wire payload."""

    show_details: bool = True
    include_description: bool = True

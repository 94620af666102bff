"""A small entity-component-system game engine built on pygame: vectors, components, entities, assets, sprites and a demo engine loop."""

__version__ = "0.1.0"
"""Entity-component core for a grid-based roguelike: components, a world store, queries, inventory, character progression, field of view, pathfinding state and tile settings."""

__version__ = "0.1.0"
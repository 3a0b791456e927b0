"""Building blocks for game-world servers: registries, locked queues, query results, linked grid references, typed containers, grid cells and queued database queries."""

__version__ = "0.1.0"
"""Front-ends driving a ``core.game.Game``."""

"""Level boards, barrels, ghosts and screens for a terminal barrel-and-ladder arcade game."""

__version__ = "0.1.0"
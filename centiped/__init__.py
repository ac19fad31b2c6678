"""Game logic for a Centipede-style arcade shooter: field, players, scoring, sound, movement, waves, text and critters."""

__version__ = "0.1.0"
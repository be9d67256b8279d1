"""
Collaborators around the engine: food, turrets, clocks and replays.
"""

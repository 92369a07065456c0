"""forage - survival game server core."""

"""Web page showing the current weather for a city."""

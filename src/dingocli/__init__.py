"""Command-line tool for managing DingoFS component builds."""

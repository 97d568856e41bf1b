"""Interface ligne de commande (Typer + Rich) pour interroger l'API TheTVDB."""

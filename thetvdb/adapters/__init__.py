"""
Couche adaptateurs.

Sous-packages :
- api/ : Client HTTP de l'API TheTVDB v3 et modeles de reponse
- cli/ : Interface ligne de commande (Typer)

Les adaptateurs dependent de core/ mais core/ ne depend jamais des adaptateurs.
"""

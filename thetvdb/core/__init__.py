"""
Couche domaine (core).

Contient les identifiants, les parametres de requete et la taxonomie d'erreurs.
Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, pydantic, CLI).

Modules :
- ids : Types valeur pour les identifiants (series, episodes, langues, films)
- params : Parametres des requetes envoyees a l'API
- errors : Exceptions levees par le client
"""

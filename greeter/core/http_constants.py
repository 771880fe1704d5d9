"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Ce module définit les codes de statut HTTP utilisés par l'application et les valeurs par défaut
de la composition du message d'accueil.
"""

# Codes de statut HTTP courants
HTTP_OK = 200
HTTP_INTERNAL_SERVER_ERROR = 500

# Bornes des statuts de succès renvoyés par les fournisseurs
HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 300

DEFAULT_VISITOR_NAME = "Guest"
FORWARDED_FOR_HEADER = "X-Forwarded-For"

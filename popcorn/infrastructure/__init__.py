"""
Couche infrastructure.

- persistence/ : Stockage durable de la liste des films vus (diskcache)
"""

"""
Couche domaine (core).

Contient les entites metier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, httpx, disque).

Sous-packages :
- entities/ : Entites du catalogue et de la liste des films vus
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
"""

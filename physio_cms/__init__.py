"""physio_cms — modèle de document à blocs + rendu HTML pour les sites Physiotherapie Kroll / Physio-Konzept."""
__version__ = "0.3.0"

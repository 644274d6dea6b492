"""API HTTP — site public par marque, aperçu éditable, admin des pages."""

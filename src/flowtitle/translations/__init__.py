"""Packaged resource bundles, one ``<bundle>_<locale>.json`` file per locale."""

"""Catalog services (list rendering, modal, orchestration)."""

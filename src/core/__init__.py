"""Catalog core: domain, repository, formatters and services."""

"""Web API for the species lookup service."""

"""Application wiring: container, factory and lifespan."""

"""Application layer: DTOs, validation, mapping and services."""

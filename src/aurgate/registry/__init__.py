"""Source-build package registries."""

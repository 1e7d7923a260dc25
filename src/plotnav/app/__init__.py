"""Application-level configuration (feature flags, settings) and the demo launcher."""

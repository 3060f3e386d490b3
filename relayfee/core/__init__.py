"""Core domain logic for relayer fee estimation."""

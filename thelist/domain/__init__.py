"""Domain values and validation rules (no storage, no HTTP)."""

"""Tasks - out-of-band jobs that reuse the repository layer (seeding, maintenance)."""

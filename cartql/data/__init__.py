# Static reference data

# (c) Copyright Datacraft, 2026
"""Manager views over the department hierarchy."""

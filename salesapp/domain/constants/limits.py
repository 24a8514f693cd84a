"""Numeric bounds shared by the request models and the domain"""

# Ids are stored as 64-bit integers
MAX_ID = 2**63 - 1

# Per-item quantity, after duplicates are merged
MAX_QUANTITY = 2**31 - 1

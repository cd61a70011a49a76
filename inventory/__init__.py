"""
Inventory module - Activation key pools.

This module handles:
- Key entity and per-tier key pools
- Bulk ingestion with global duplicate suppression
- Admin removal of unissued keys
- Pool statistics
"""

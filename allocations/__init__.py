"""
Allocations app: binds paid orders to keys through the append-only
assignment ledger.
"""

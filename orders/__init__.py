"""
Orders app: the minimal order subsystem that drives key allocation from
payment events and re-drives it on restock.
"""

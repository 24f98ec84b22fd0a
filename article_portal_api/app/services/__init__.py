"""
Service layer abstraction.

Services encapsulate the read‑modify‑write logic against MongoDB so
that API handlers only translate between HTTP and Python exceptions.
"""

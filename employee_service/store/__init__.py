"""
In-memory employee store: schemas, the store object and its operations.
"""

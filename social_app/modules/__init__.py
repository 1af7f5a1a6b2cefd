"""
Modules package initialization.
Each functional module keeps its models, schemas, services and API router side by side.
"""

"""Domain layer.

Pure business logic for body metrics, palate-profile learning and the
user-profile record, decoupled from GraphQL and infrastructure.
"""

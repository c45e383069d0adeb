"""GraphQL API surface (strawberry)."""

"""GraphQL service exposing the projection library."""

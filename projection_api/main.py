"""FastAPI app with Strawberry GraphQL."""

import logging

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from projection_api.schema import API_VERSION, schema
from projection_api.settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Projection API", version=API_VERSION)
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Health check for load balancers and Docker."""
    return {"status": "ok"}

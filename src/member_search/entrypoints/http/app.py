from fastapi import FastAPI

from member_search.entrypoints.http.exception_handlers import register_exception_handlers
from member_search.entrypoints.http.routes.health import router as health_router
from member_search.entrypoints.http.routes.members import router as members_router
from member_search.entrypoints.http.routes.teams import router as teams_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Member Search API",
        description="""
        Member directory API with dynamic filtering and pagination.

        ## Features
        - Search members by username, team name and age range
        - Paginated results with an optimized total count
        - Per-team age statistics
        - Bulk rename, age shift and delete statements

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(members_router, prefix="/v1")
    app.include_router(teams_router, prefix="/v1")

    return app


app = build_app()

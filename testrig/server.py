"""HTTP API for running tests remotely."""

import json
import logging
from pathlib import Path

from aiohttp import web
from aiohttp.typedefs import Handler
from pydantic import BaseModel, Field, ValidationError, field_validator

from testrig.service import DEFAULT_SPECS_DIR, ORCHESTRATION_ERRORS, execute_run

log = logging.getLogger(__name__)

VERSION = "1.0.0"

PROJECT_PATH = web.AppKey("project_path", Path)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class RunRequest(BaseModel):
    """Body of a POST /test/run request."""

    parallel: bool = False
    agents: int | None = Field(default=None, ge=1)
    framework: str | None = None
    specs_dir: Path = DEFAULT_SPECS_DIR

    @field_validator("specs_dir")
    @classmethod
    def _inside_project(cls, value: Path) -> Path:
        if value.is_absolute() or ".." in value.parts:
            raise ValueError("specs_dir must be a relative path inside the project")
        return value


@web.middleware
async def cors_middleware(
    request: web.Request, handler: Handler
) -> web.StreamResponse:
    """Answer preflight requests, add CORS headers and render 404s as JSON."""
    if request.method == "OPTIONS":
        response: web.StreamResponse = web.Response(status=200)
    else:
        try:
            response = await handler(request)
        except web.HTTPNotFound:
            response = web.json_response({"error": "Not found"}, status=404)
        except web.HTTPException as e:
            e.headers.update(CORS_HEADERS)
            raise

    response.headers.update(CORS_HEADERS)
    return response


async def health(request: web.Request) -> web.Response:
    """Report that the server is up."""
    return web.json_response({"status": "healthy", "version": VERSION})


async def run_tests(request: web.Request) -> web.Response:
    """Run the project's tests and return the combined result."""
    try:
        body = await request.json()
    except json.JSONDecodeError:
        return web.json_response({"error": "Invalid JSON"}, status=400)

    try:
        run_request = RunRequest.model_validate(body)
    except ValidationError as e:
        return web.json_response({"error": f"Invalid request: {e}"}, status=400)

    log.info(
        "Test run requested: parallel=%s agents=%s framework=%s",
        run_request.parallel,
        run_request.agents,
        run_request.framework,
    )

    try:
        result = await execute_run(
            request.app[PROJECT_PATH],
            parallel=run_request.parallel,
            agents=run_request.agents,
            framework=run_request.framework,
            specs_dir=run_request.specs_dir,
        )
    except ORCHESTRATION_ERRORS as e:
        log.error("Test run failed: %s", e)
        return web.json_response({"error": str(e)}, status=422)

    return web.json_response(
        {"status": "success", "success": result.success, "data": result.to_dict()}
    )


def create_app(project_path: Path) -> web.Application:
    """Build the API application for the project at ``project_path``."""
    app = web.Application(middlewares=[cors_middleware])
    app[PROJECT_PATH] = project_path
    app.router.add_get("/health", health)
    app.router.add_post("/test/run", run_tests)
    return app


def serve(host: str, port: int, project_path: Path) -> None:
    """Serve the API until interrupted."""
    log.info("Serving %s on http://%s:%d", project_path, host, port)
    log.info("Endpoints: GET /health, POST /test/run")
    web.run_app(create_app(project_path), host=host, port=port, print=None)
    log.info("Server closed")

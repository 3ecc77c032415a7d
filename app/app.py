import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

import httpx
import pydantic
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route
from starlette.schemas import SchemaGenerator

from app import config
from app.logs import configure_logging
from domain.completion import CompletionClient, completion_client_factory
from domain.errors import ErrorKind, RecipeError, ValidationError
from domain.llm_service import LLMService
from domain.mealdb import MealDBClient, mealdb_client_factory
from domain.models import RecipeRequest
from domain.services import generate_recipe


logger = logging.getLogger(__name__)


def aJSONResponse(route: Callable[..., Awaitable[Any]]):
    """Serialize the route's result, turning errors into 404/400 responses."""

    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        try:
            data = await route(*args, **kwargs)
        except RecipeError as e:
            match e.kind:
                case ErrorKind.NOT_FOUND:
                    return JSONResponse({"message": e.message}, status_code=404)
                case _:
                    logger.warning("%s: %s", e.kind.value, e.message)
                    return JSONResponse({"error": e.message}, status_code=400)
        except httpx.HTTPError as e:
            logger.exception("Upstream request failed")
            return JSONResponse({"error": str(e)}, status_code=400)
        except Exception as e:
            logger.exception("Could not generate recipe")
            return JSONResponse({"error": str(e) or type(e).__name__}, status_code=400)
        return JSONResponse(data)

    return wrapper


async def parse_request(request: Request) -> RecipeRequest:
    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError("Request body is not valid JSON.") from e
    try:
        return RecipeRequest.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid request: {e.errors(include_url=False)}") from e


@aJSONResponse
async def generate(request: Request) -> dict[str, Any]:
    """Find a recipe for the first ingredient and enrich it for the goal.

    ---
    summary: Generate a Spanish recipe from an ingredient and a goal.
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              ingredients:
                type: array
                items:
                  type: string
                description: Only the first ingredient is used. Also accepted as ingredientes.
              goal:
                type: string
                description: Free-text goal, e.g. lose weight. Also accepted as objetivo.
    responses:
      200:
        description: The enriched recipe.
        content:
          application/json:
            schema:
              type: object
              properties:
                name: {type: string}
                category: {type: string, nullable: true}
                area: {type: string, nullable: true}
                instructions: {type: string}
                imageUrl: {type: string, nullable: true}
                difficulty: {type: string}
                recommendation: {type: string}
                substitutions:
                  type: array
                  items: {type: string}
                ingredients:
                  type: array
                  items:
                    type: object
                    properties:
                      name: {type: string}
                      measure: {type: string}
      400:
        description: 'Invalid request or a failure upstream. Body is {"error": message}.'
      404:
        description: 'No recipe found. Body is {"message": message}.'
    """
    recipe_request = await parse_request(request)
    recipe = await generate_recipe(
        recipe_request.ingredients,
        recipe_request.goal,
        mealdb=request.app.state.mealdb,
        llm=request.app.state.llm,
    )
    return recipe.to_dict()


SCHEMAS = SchemaGenerator(
    {"openapi": "3.0.0", "info": {"title": "CookIA", "version": "0.1.0"}}
)


async def openapi_schema(request: Request) -> Response:
    return SCHEMAS.OpenAPIResponse(request=request)


def create_app(
    cfg: config.Config | None = None,
    *,
    completion_http: httpx.AsyncClient | None = None,
    mealdb_http: httpx.AsyncClient | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg
    configure_logging(cfg.log_level)

    completion = CompletionClient(
        token=cfg.groq_api_key,
        model=cfg.completion_model,
        client=(
            completion_client_factory(cfg.completion_base_url)
            if completion_http is None
            else completion_http
        ),
    )
    mealdb = MealDBClient(
        mealdb_client_factory(cfg.mealdb_base_url) if mealdb_http is None else mealdb_http
    )

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        yield
        await completion.close()
        await mealdb.close()

    app = Starlette(
        debug=cfg.env == config.Env.local,
        routes=[
            Route("/api/recipe/generate", generate, methods=["POST"]),
            Route("/schema", openapi_schema, include_in_schema=False),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ],
        lifespan=lifespan,
    )

    app.state.config = cfg
    app.state.mealdb = mealdb
    app.state.llm = LLMService(completion)
    return app


def main() -> None:
    import uvicorn

    cfg = config.Config()
    uvicorn.run(create_app(cfg), host=cfg.host, port=cfg.port)

"""JSON handlers for the /games endpoints."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.responses import JSONResponse, Response

from vault.games.types import CreateGameRequest, Found, UpdateGameRequest

if TYPE_CHECKING:
    from pydantic import BaseModel
    from starlette.requests import Request

    from vault.games.service import GameService

INVALID_BODY_MESSAGE = "Invalid request body"


class InvalidJsonError(ValueError):
    """The request body is empty or not valid JSON."""


def _service(request: Request) -> GameService:
    return request.app.state.game_service


def _not_found(game_id: int) -> JSONResponse:
    return JSONResponse({"message": f"Game with ID {game_id} not found"}, status_code=HTTPStatus.NOT_FOUND)


def _bad_request(errors: list[Any]) -> JSONResponse:
    return JSONResponse({"message": INVALID_BODY_MESSAGE, "errors": errors}, status_code=HTTPStatus.BAD_REQUEST)


async def _read_json(request: Request) -> Any:  # noqa: ANN401
    raw_body = await request.body()
    try:
        return json.loads(raw_body)
    except ValueError as exc:
        raise InvalidJsonError(str(exc)) from exc


async def _parse_body[M: BaseModel](request: Request, model: type[M]) -> M | JSONResponse:
    """Validate the JSON body against model, or build the 400 response describing why not."""
    try:
        return model.model_validate(await _read_json(request))
    except InvalidJsonError as e:
        return _bad_request([{"loc": [], "msg": f"Invalid JSON: {e}", "type": "json_invalid"}])
    except ValidationError as e:
        return _bad_request(e.errors(include_url=False, include_context=False, include_input=False))


async def list_games(request: Request) -> JSONResponse:
    """GET /games"""
    games = await _service(request).list_all()
    return JSONResponse([game.to_json() for game in games])


async def get_game(request: Request) -> JSONResponse:
    """GET /games/{game_id}"""
    game_id: int = request.path_params["game_id"]
    result = await _service(request).get_by_id(game_id)
    if not isinstance(result, Found):
        return _not_found(game_id)
    return JSONResponse(result.value.to_json())


async def create_game(request: Request) -> JSONResponse:
    """POST /games - 201 with a Location header pointing at the new game."""
    body = await _parse_body(request, CreateGameRequest)
    if isinstance(body, JSONResponse):
        return body

    created = await _service(request).create(body)
    location = str(request.url_for("get_game", game_id=created.id))
    return JSONResponse(created.to_json(), status_code=HTTPStatus.CREATED, headers={"Location": location})


async def update_game(request: Request) -> JSONResponse:
    """PUT /games/{game_id} - full replace of the stored game."""
    game_id: int = request.path_params["game_id"]
    body = await _parse_body(request, UpdateGameRequest)
    if isinstance(body, JSONResponse):
        return body

    result = await _service(request).update(game_id, body)
    if not isinstance(result, Found):
        return _not_found(game_id)
    return JSONResponse(result.value.to_json())


async def delete_game(request: Request) -> Response:
    """DELETE /games/{game_id}"""
    game_id: int = request.path_params["game_id"]
    if not await _service(request).delete(game_id):
        return _not_found(game_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)

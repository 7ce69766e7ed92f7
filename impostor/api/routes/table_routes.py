"""Table API routes -- roster setup, game start, reveal and turn order."""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from impostor.application.table_session import TableSession
from impostor.domain.enums import Difficulty
from impostor.domain.errors import GameAlreadyComplete, NoWordsAvailable
from impostor.domain.player import PlayerName
from impostor.domain.rules import GameRules

log = logging.getLogger("impostor.api")

router = APIRouter(prefix="/api/tables", tags=["tables"])


class CreateTableRequest(BaseModel):
    player_count: Optional[int] = Field(None, ge=GameRules.MIN_PLAYERS, le=30)


class AddPlayerRequest(BaseModel):
    name: str = Field("", max_length=PlayerName.MAX_LENGTH)


class RenamePlayerRequest(BaseModel):
    name: str = Field(..., max_length=PlayerName.MAX_LENGTH)


class StartGameRequest(BaseModel):
    impostor_count: int = Field(GameRules.MIN_IMPOSTORS, ge=1)
    category_ids: List[str] = Field(default_factory=list)
    difficulty: Optional[int] = Field(None, ge=int(Difficulty.EASY), le=int(Difficulty.HARD))
    show_hint: bool = False


class RevealRequest(BaseModel):
    player_id: Optional[str] = None


_services = None


def init_routes(services):
    global _services
    _services = services


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _get_table(table_id: str) -> TableSession:
    table = _services.tables.get(table_id)
    if not table:
        raise HTTPException(status_code=404, detail="Table not found")
    return table


def _get_game(table_id: str):
    table = _get_table(table_id)
    return table, _game_of(table)


def _game_of(table: TableSession):
    """The table's game, or 404. Also used inside `_update` changes, under the store lock."""
    if table.game is None:
        raise HTTPException(status_code=404, detail="No game in progress")
    return table.game


def _update(table_id: str, change) -> TableSession:
    """Apply a domain change to the stored table, mapping domain errors to HTTP."""
    try:
        updated = _services.tables.update(table_id, change)
    except (GameAlreadyComplete, NoWordsAvailable) as e:
        log.info("Rejected change on table %s: %s", table_id, e)
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        log.info("Rejected change on table %s: %s", table_id, e)
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return updated


def _validation_view(table: TableSession) -> dict:
    players = table.players
    errors = _services.players.validate_players(players)
    return {
        "ready": not errors,
        "errors": errors,
        "ready_count": _services.players.ready_count(players),
        "player_count": len(players),
        "max_impostors": GameRules.max_impostors(len(players)),
    }


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

@router.post("")
def api_create_table(req: CreateTableRequest):
    """Open a table with an initial roster of unnamed players."""
    table = TableSession(
        session_id=_services.id_generator.generate("table"),
        players=_services.players.create_roster(req.player_count),
    )
    _services.tables.save(table)
    return table.to_dict()


@router.get("/{table_id}")
def api_get_table(table_id: str):
    return _get_table(table_id).to_dict()


@router.delete("/{table_id}")
def api_close_table(table_id: str):
    """Close the table and drop its roster and game."""
    if not _services.tables.delete(table_id):
        raise HTTPException(status_code=404, detail="Table not found")
    log.info("Closed table %s", table_id)
    return {"id": table_id, "closed": True}


@router.post("/{table_id}/players")
def api_add_player(table_id: str, req: AddPlayerRequest):
    table = _update(
        table_id,
        lambda t: t.with_players(_services.players.add_player(t.players, req.name)),
    )
    return table.to_dict()


@router.patch("/{table_id}/players/{player_id}")
def api_rename_player(table_id: str, player_id: str, req: RenamePlayerRequest):
    table = _get_table(table_id)
    if not any(p.id == player_id for p in table.players):
        raise HTTPException(status_code=404, detail="Player not found")
    table = _update(
        table_id,
        lambda t: t.with_players(
            _services.players.update_player_name(t.players, player_id, req.name)
        ),
    )
    return table.to_dict()


@router.delete("/{table_id}/players/{player_id}")
def api_remove_player(table_id: str, player_id: str):
    table = _get_table(table_id)
    if not any(p.id == player_id for p in table.players):
        raise HTTPException(status_code=404, detail="Player not found")
    table = _update(
        table_id,
        lambda t: t.with_players(_services.players.remove_player(t.players, player_id)),
    )
    return table.to_dict()


@router.get("/{table_id}/validation")
def api_validate_table(table_id: str):
    return _validation_view(_get_table(table_id))


# ---------------------------------------------------------------------------
# Game lifecycle
# ---------------------------------------------------------------------------

@router.post("/{table_id}/game")
def api_start_game(table_id: str, req: StartGameRequest):
    """Start (or restart) the game. A fresh Game replaces any previous one."""
    table = _get_table(table_id)
    validation = _validation_view(table)
    if not validation["ready"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))

    known = {c.id for c in _services.word_repository.get_categories()}
    unknown = [c for c in req.category_ids if c not in known]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown categories: {', '.join(unknown)}")

    def start(t: TableSession) -> TableSession:
        game = _services.games.start_game(
            t.players, req.impostor_count, req.category_ids, req.difficulty
        )
        return t.with_game(game, show_hint=req.show_hint)

    return _update(table_id, start).game.to_dict()


@router.get("/{table_id}/game")
def api_get_game(table_id: str, reveal: bool = False):
    """Game state. `reveal=true` (roles and word) only once the game is complete."""
    _, game = _get_game(table_id)
    if reveal and not game.is_complete:
        raise HTTPException(status_code=409, detail="Roles stay secret until every player has had a turn")
    return game.to_dict(reveal=reveal)


@router.post("/{table_id}/game/reveal")
def api_reveal_role(table_id: str, req: RevealRequest):
    """Mark a player (default: current) as having seen their role; return their card."""
    table, game = _get_game(table_id)
    player_id = req.player_id
    if player_id is None:
        current = game.current_player()
        if current is None:
            raise HTTPException(status_code=409, detail="Game is already complete")
        player_id = current.id
    elif game.get_player(player_id) is None:
        raise HTTPException(status_code=404, detail="Player not found")

    table = _update(
        table_id, lambda t: t.with_game(_game_of(t).mark_player_as_seen_role(player_id))
    )
    return {
        "card": table.game.role_card(player_id, show_hint=table.show_hint),
        "game": table.game.to_dict(),
    }


@router.post("/{table_id}/game/next")
def api_next_player(table_id: str):
    _get_game(table_id)
    table = _update(table_id, lambda t: t.with_game(_game_of(t).move_to_next_player()))
    return table.game.to_dict()


@router.delete("/{table_id}/game")
def api_discard_game(table_id: str):
    """Back to setup. The roster is kept, the game is dropped."""
    _get_table(table_id)
    return _update(table_id, lambda t: t.with_game(None)).to_dict()

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from . import __version__
from .collection import NoteCollection
from .config import Settings, load_settings
from .markdown import MarkdownRenderer, excerpt
from .notes import Note, NoteStatus, ValidationError
from .schemas import NoteCreate, NoteEdit, NoteOut, NoteStats

logger = logging.getLogger(__name__)


def _out(note: Note) -> NoteOut:
    return NoteOut.model_validate(note)


def create_app(settings: Settings | None = None, notes: NoteCollection | None = None) -> FastAPI:
    settings = settings or load_settings()
    collection = notes if notes is not None else NoteCollection()

    base_dir = Path(__file__).parent
    templates = Jinja2Templates(directory=str(base_dir / "templates"))
    md = MarkdownRenderer()

    security = HTTPBasic(auto_error=False)

    def require_auth(credentials: HTTPBasicCredentials | None = Depends(security)) -> None:
        if not settings.auth_enabled:
            return None
        if credentials is None:
            raise HTTPException(status_code=401, detail="Authentication required")
        if credentials.username != settings.auth_user or credentials.password != settings.auth_pass:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return None

    app = FastAPI(
        title="notelist",
        version=__version__,
        dependencies=[Depends(require_auth)],
    )
    # Handlers are coroutines so every access to the collection happens on the
    # event loop thread.
    app.state.notes = collection

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse({"detail": str(exc)}, status_code=422)

    def _get_or_404(note_id: int) -> Note:
        note = collection.get_note_by_id(note_id)
        if note is None:
            raise HTTPException(status_code=404, detail="Note not found")
        return note

    # ---- HTML ----

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "notes": collection.get_all_notes(),
                "pending_count": collection.get_pending_notes_count(),
                "excerpt": excerpt,
            },
        )

    @app.get("/notes/{note_id}", response_class=HTMLResponse)
    async def view_note(request: Request, note_id: int) -> HTMLResponse:
        note = _get_or_404(note_id)
        content_html = Markup(md.render_note(note))  # safe because Markdown renderer disables raw HTML
        return templates.TemplateResponse(
            request,
            "note_view.html",
            {"note": note, "content_html": content_html},
        )

    # ---- JSON API ----

    @app.get("/api/notes", response_model=list[NoteOut])
    async def api_list(status: NoteStatus | None = None) -> list[NoteOut]:
        if status is NoteStatus.PENDING:
            items = collection.get_pending_notes()
        elif status is NoteStatus.COMPLETED:
            items = collection.get_completed_notes()
        else:
            items = collection.get_all_notes()
        return [_out(n) for n in items]

    @app.post("/api/notes", response_model=NoteOut, status_code=201)
    async def api_create(payload: NoteCreate) -> NoteOut:
        note = collection.add_note(payload.title, payload.content, confirmable=payload.confirmable)
        logger.info("Created note %d (%s)", note.id, note.variant.value)
        return _out(note)

    @app.get("/api/notes/search", response_model=list[NoteOut])
    async def api_search(q: str = "") -> list[NoteOut]:
        return [_out(n) for n in collection.search_notes(q)]

    @app.get("/api/notes/sorted", response_model=list[NoteOut])
    async def api_sorted(by: Literal["status", "created"] = "created") -> list[NoteOut]:
        if by == "status":
            items = collection.sort_notes_by_status()
        else:
            items = collection.sort_notes_by_creation_time()
        return [_out(n) for n in items]

    @app.get("/api/notes/stats", response_model=NoteStats)
    async def api_stats() -> NoteStats:
        return NoteStats(
            total=collection.get_notes_count(),
            pending=collection.get_pending_notes_count(),
            completed=collection.get_completed_notes_count(),
        )

    @app.get("/api/notes/{note_id}", response_model=NoteOut)
    async def api_get(note_id: int) -> NoteOut:
        return _out(_get_or_404(note_id))

    @app.put("/api/notes/{note_id}", response_model=NoteOut)
    async def api_edit(note_id: int, payload: NoteEdit) -> NoteOut:
        _get_or_404(note_id)
        collection.edit_note(note_id, payload.title, payload.content)
        logger.info("Edited note %d", note_id)
        return _out(_get_or_404(note_id))

    @app.post("/api/notes/{note_id}/complete", response_model=NoteOut)
    async def api_complete(note_id: int) -> NoteOut:
        _get_or_404(note_id)
        collection.complete_note(note_id)
        logger.info("Completed note %d", note_id)
        return _out(_get_or_404(note_id))

    @app.delete("/api/notes/{note_id}", status_code=204)
    async def api_delete(note_id: int) -> Response:
        _get_or_404(note_id)
        collection.delete_note(note_id)
        logger.info("Deleted note %d", note_id)
        return Response(status_code=204)

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"ok": True, "notes": collection.get_notes_count()}

    return app


app = create_app()

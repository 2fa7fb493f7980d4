import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from .config import APP_TITLE, HOST, LOG_LEVEL, PORT, SEED_PATH
from .errors import InvalidArgumentError, NotFoundError
from .queries import ConsensusQueries
from .routes import router
from .seed import build_store
from .store import EntityStore
from .suggestions import SuggestionMutator

log = logging.getLogger(__name__)


def logging_level(name: str) -> int:
    # uvicorn's "trace" has no stdlib counterpart
    if name == "trace":
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown LOG_LEVEL: {name}")
    return level


def setup_logging() -> None:
    logging.basicConfig(
        level=logging_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def attach_store(app: FastAPI, store: EntityStore) -> None:
    app.state.store = store
    app.state.queries = ConsensusQueries(store)
    app.state.mutator = SuggestionMutator(store)


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: one store per process unless one was injected
        if getattr(app.state, "store", None) is None:
            setup_logging()
            attach_store(app, build_store(SEED_PATH))
            log.info("store ready (seed: %s)", SEED_PATH or "built-in demo")
        yield
        # Shutdown: nothing to release, state is in memory only

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    if store is not None:
        attach_store(app, store)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(request: Request, exc: InvalidArgumentError):
        log.info("rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(router)

    @app.get("/")
    def root():
        return RedirectResponse(url="/proposals")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("stakeview.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL)

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool
from .models import SummaryRequest, SummaryResponse, HealthDTO
from ..config import SummaryConfig
from ..summarizer import Summarizer
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def create_app(summarizer: Optional[Summarizer] = None, cfg: Optional[SummaryConfig] = None) -> FastAPI:
    cfg = cfg or SummaryConfig.load()
    app = FastAPI(title="Summary Service", version="0.1")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.cfg = cfg
    app.state.summarizer = summarizer

    @app.on_event("startup")
    def _load_summarizer():
        # a lemmatizer load failure aborts startup
        if app.state.summarizer is None:
            logger.info("loading WordNet dictionary")
            app.state.summarizer = Summarizer.from_config(cfg)

    @app.get("/health", response_model=HealthDTO)
    def health(request: Request):
        return HealthDTO(ok=True, ready=request.app.state.summarizer is not None)

    @app.post("/summary", response_model=SummaryResponse)
    async def summary(req: SummaryRequest, request: Request):
        summarizer: Optional[Summarizer] = request.app.state.summarizer
        if summarizer is None:
            raise HTTPException(status_code=503, detail="summarizer not ready")
        if len(req.text) > cfg.max_text_chars:
            raise HTTPException(status_code=413, detail=f"text exceeds {cfg.max_text_chars} characters")
        # CPU-bound; keep it off the event loop
        phrases, keywords = await run_in_threadpool(summarizer.summarize, req.text, req.num_phrases)
        return SummaryResponse(phrases=phrases, keywords=keywords)

    return app


app = create_app()

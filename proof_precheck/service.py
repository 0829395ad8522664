# proof_precheck/service.py
import logging
import os
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictStr

from proof_precheck.core.checks.lexicon import synonyms as lookup_synonyms
from proof_precheck.core.config import load_all
from proof_precheck.core.constants import VERSION
from proof_precheck.core.engine import analyze
from proof_precheck.core.utils import to_utf16

logger = logging.getLogger(__name__)

CONFIG_ENV = "PROOF_PRECHECK_CONFIG"


class AnalyzeRequest(BaseModel):
    text: StrictStr                               # plain text snapshot from the editor


class AnalyzeResponse(BaseModel):
    errors: List[Dict[str, Any]]


class SynonymsResponse(BaseModel):
    synonyms: List[str]


def create_app(cfg: Optional[Dict[str, Any]] = None) -> FastAPI:
    cfg = cfg or load_all(os.environ.get(CONFIG_ENV))
    svc = cfg["settings"]["service"]
    max_chars = int(svc.get("max_text_chars") or 0)
    utf16 = svc.get("offset_unit") == "utf16"

    app = FastAPI(title="proof-precheck", version=VERSION)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": "invalid_request", "detail": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception("request %s %s failed", request.method, request.url.path)
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True, "version": VERSION}

    @app.post("/api/analyze", response_model=AnalyzeResponse)
    def analyze_text(req: AnalyzeRequest):
        if max_chars and len(req.text) > max_chars:
            return JSONResponse({"error": "text_too_large"}, status_code=413)
        findings = analyze(req.text, cfg)
        if utf16:
            findings = to_utf16(req.text, findings)
        return {"errors": [f.to_dict() for f in findings]}

    @app.get("/api/analyze/synonyms/{word}", response_model=SynonymsResponse)
    def synonyms(word: str):
        return {"synonyms": lookup_synonyms(word)}

    return app


app = create_app()


def serve(cfg: Optional[Dict[str, Any]] = None, host: Optional[str] = None, port: Optional[int] = None) -> None:
    cfg = cfg or load_all(os.environ.get(CONFIG_ENV))
    svc = cfg["settings"]["service"]
    uvicorn.run(create_app(cfg), host=host or svc["host"], port=int(port or svc["port"]))


if __name__ == "__main__":
    serve()

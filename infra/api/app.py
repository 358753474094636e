from __future__ import annotations

from dataclasses import asdict

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core.config import settings
from domain.entities import PRESETS, ProteinForm
from domain.errors import DomainError
from domain.reference import reference_payload
from domain.use_cases import (
    factor_label,
    factor_note,
    format_report,
    format_summary,
    result_card,
)
from .schemas import (
    APIResponse,
    CardRow,
    EstimateResponse,
    EstimateSchema,
    PresetApplyInput,
    PresetSchema,
    ProteinInputSchema,
)


def estimate_response(form: ProteinForm) -> EstimateResponse:
    est = form.estimate()
    return EstimateResponse(
        estimate=EstimateSchema(**asdict(est), percent_applicable=est.percent_applicable),
        card=[CardRow(label=label, value=value) for label, value in result_card(est)],
        factor_label=factor_label(est),
        factor_note=factor_note(est, form.use_custom),
        weight_hint=form.weight_hint(),
        summary=format_summary(est),
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Protein Needs Calculator API", version="0.1.0")
    log = structlog.get_logger("api")
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        log.warning("domain_error", code=exc.code, message=str(exc), path=str(request.url.path))
        body = APIResponse(ok=False, error={"code": exc.code, "message": str(exc)})
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/protein/estimate", response_model=APIResponse)
    def protein_estimate(payload: ProteinInputSchema) -> APIResponse:
        out = estimate_response(payload.to_form())
        log.info(
            "protein_estimate",
            goal=payload.goal,
            activity=payload.activity,
            use_custom=payload.use_custom,
            factor=out.estimate.selected_factor,
            invalid=out.estimate.invalid,
        )
        return APIResponse(ok=True, data=out.model_dump())

    @app.get("/api/protein/presets", response_model=APIResponse)
    def protein_presets() -> APIResponse:
        items = [PresetSchema(**asdict(p)).model_dump() for p in PRESETS]
        return APIResponse(ok=True, data={"presets": items})

    @app.post("/api/protein/preset", response_model=APIResponse)
    def protein_apply_preset(payload: PresetApplyInput) -> APIResponse:
        form = payload.form.to_form()
        preset = form.apply_preset(payload.preset)
        log.info("protein_preset_applied", preset=preset.key, factor=preset.factor)
        return APIResponse(
            ok=True,
            data={
                "form": form.as_dict(),
                "result": estimate_response(form).model_dump(),
            },
        )

    @app.get("/api/protein/reference", response_model=APIResponse)
    def protein_reference() -> APIResponse:
        return APIResponse(ok=True, data=reference_payload())

    @app.post("/api/protein/report", response_class=PlainTextResponse)
    def protein_report(payload: ProteinInputSchema) -> PlainTextResponse:
        form = payload.to_form()
        text = format_report(form.estimate(), form.to_input(), title=settings.report_title)
        return PlainTextResponse(text)

    return app

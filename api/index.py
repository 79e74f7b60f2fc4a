from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

import os
import sys

# Make apim_flow importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from apim_flow.catalog import JsonDirectoryCatalog
from apim_flow.config import get_settings
from apim_flow.errors import CatalogReadError, ErrorResponse, FlowError
from apim_flow.kernel import FlowKernel, parse_answers
from apim_flow.logging_config import clear_context, configure_logging, get_logger, set_request_id


settings = get_settings()
configure_logging("apim-flow", settings.log_level)
logger = get_logger("apim_flow.api")

# --- FastAPI app setup -------------------------------------------------------

app = FastAPI(title="APIM Flow Kernel", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    request_id = set_request_id(request.headers.get("x-request-id"))
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers["x-request-id"] = request_id
    return response


# --- Flow kernel setup -------------------------------------------------------

catalog = JsonDirectoryCatalog(settings.resolved_catalog_path())
kernel = FlowKernel(catalog)


def get_kernel() -> FlowKernel:
    return kernel


class FlowAnswersRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    environment: str | None = None
    require_vnet: bool | None = Field(default=None, alias="requireVnet")
    require_multi_region: bool | None = Field(default=None, alias="requireMultiRegion")
    require_self_hosted_gateway: bool | None = Field(default=None, alias="requireSelfHostedGateway")
    require_ai_gateway: bool | None = Field(default=None, alias="requireAiGateway")
    require_sla: bool | None = Field(default=None, alias="requireSla")


FAILURE_MESSAGE = "Failed to evaluate APIM flow"


def _failure_response(code: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=FAILURE_MESSAGE, code=code).model_dump(),
    )


# --- Routes ------------------------------------------------------------------


@app.get("/")
async def root():
    return {
        "message": "APIM Flow Kernel v1.0 - gateway tier and policy advisor",
        "description": "Ranks API gateway tiers against operator requirements and assembles a matching policy bundle.",
        "mode": settings.mode,
        "endpoints": ["/flow/evaluate", "/flow/requirements", "/health"],
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "kernel_version": "1.0.0",
        "mode": settings.mode,
        "catalog_path": str(catalog.root),
    }


@app.post("/flow/evaluate")
def evaluate_flow(
    payload: FlowAnswersRequest | None = None,
    flow_kernel: FlowKernel = Depends(get_kernel),
):
    payload = payload or FlowAnswersRequest()
    answers, warnings = parse_answers(payload.model_dump(by_alias=True, exclude_none=True))
    try:
        return flow_kernel.evaluate_flow(answers, warnings=warnings)
    except CatalogReadError as e:
        logger.error("Catalog read failed", code=e.code, details=e.details, exc_info=True)
        return _failure_response(e.code)
    except FlowError as e:
        logger.error("Flow evaluation failed", code=e.code, exc_info=True)
        return _failure_response(e.code)
    except Exception:
        logger.exception("Unexpected error evaluating APIM flow")
        return _failure_response("INTERNAL_ERROR")


@app.get("/flow/requirements")
def flow_requirements(flow_kernel: FlowKernel = Depends(get_kernel)):
    try:
        snapshot = flow_kernel.catalog.load_snapshot()
    except CatalogReadError as e:
        logger.error("Catalog read failed", code=e.code, details=e.details, exc_info=True)
        return _failure_response(e.code)

    return {
        "requirements": [
            {
                "id": rule.answer_field.value,
                "label": rule.label,
                "capabilityField": rule.capability_id,
            }
            for rule in snapshot.rules
        ],
        "tiers": [tier.key for tier in snapshot.tiers],
    }

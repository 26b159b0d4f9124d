import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from app.core.exceptions import (
    FlowInputError,
    GenerationEmpty,
    GenerationIrreparable,
    UnknownFlowError,
)
from app.services.flow_runner import FlowRunner, get_flow_runner
from app.services.flows import list_flows
from app.services.telemetry import instrument

logger = logging.getLogger("studytrack.api.flows")
router = APIRouter(prefix="/api/flows", tags=["flows"])


@router.get("")
def list_available_flows():
    """Every flow with its input and output JSON schema."""
    return {"flows": list_flows()}


@router.post("/{flow_name}")
@instrument(route="/api/flows/{flow_name}", version="v1")
async def run_generation_flow(
    flow_name: str,
    payload: dict = Body(...),
    runner: FlowRunner = Depends(get_flow_runner),
):
    try:
        run = await runner.run(flow_name, payload)
    except UnknownFlowError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FlowInputError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    except GenerationEmpty as e:
        logger.warning("[flows] %s", e)
        raise HTTPException(status_code=503, detail=e.user_message)
    except GenerationIrreparable as e:
        logger.error("[flows] %s", e)
        raise HTTPException(
            status_code=502,
            detail="The AI response could not be turned into a valid result. Please try again.",
        )
    return run.to_dict()

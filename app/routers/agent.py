from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from uuid import UUID
import logging
import traceback

from app.schemas.agent import AgentCreateRequest, AgentUpdateRequest, AgentTarget, AgentResponse
from app.schemas.common import DateWindow, SuccessResponse, date_window
from app.db.session import get_db
from app.services.agent_services import AgentServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/agents", tags=["Agents"])


@router.get("", response_model=List[AgentResponse], summary="List agents that existed by endDate")
async def list_agents(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await AgentServices.list_agents_service(window, db)
    except Exception as e:
        logger.error("Error in list_agents: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("", response_model=AgentResponse, status_code=201, summary="Create an agent")
async def create_agent(
    request: AgentCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await AgentServices.create_agent_service(request, db)
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Agent email already registered")
    except Exception as e:
        logger.error("Error in create_agent: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.put("/{agent_id}", response_model=AgentResponse, summary="Update agent details")
async def update_agent(
    agent_id: UUID,
    request: AgentUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await AgentServices.update_agent_service(agent_id, request, db)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Agent email already registered")
    except Exception as e:
        logger.error("Error in update_agent: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.put(
    "/{agent_id}/target",
    response_model=AgentResponse,
    summary="Set a sales target",
    description="Sets the target for a (startDate, endDate) period, replacing an existing target for the same period.",
)
async def set_agent_target(
    agent_id: UUID,
    request: AgentTarget,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await AgentServices.set_target_service(agent_id, request, db)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Error in set_agent_target: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.delete("/{agent_id}", response_model=SuccessResponse, summary="Delete an agent")
async def delete_agent(
    agent_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    try:
        await AgentServices.delete_agent_service(agent_id, db)
        return SuccessResponse()
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Error in delete_agent: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")

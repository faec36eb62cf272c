"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from models.config import DiffSettings, ExportSettings
from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration, with partial sections"""

    diff: dict[str, Any] | None = None
    export: dict[str, Any] | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: DiffSettings
    export: ExportSettings
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=DiffSettings(**config["diff"]),
        export=ExportSettings(**config["export"]),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Partial sections are merged over the stored values, then validated as a whole
    if request.diff:
        current_config["diff"] = {**current_config["diff"], **request.diff}
    if request.export:
        current_config["export"] = {**current_config["export"], **request.export}

    try:
        config_manager.save_config(current_config)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=[{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()],
        )
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}

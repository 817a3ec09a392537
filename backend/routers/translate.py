import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from services.translation_service import TranslationError, translate_resume

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["translate"])


class TranslateResumeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: Any = None
    target_language: str | None = Field(default=None, alias="targetLanguage")


@router.post("/translate-resume")
async def translate_resume_endpoint(req: TranslateResumeRequest):
    if req.resume is None or not (req.target_language or "").strip():
        raise HTTPException(status_code=400, detail="resume and targetLanguage are required")
    try:
        return await translate_resume(req.resume, req.target_language.strip())
    except TranslationError as e:
        detail = {"error": e.message}
        if e.raw is not None:
            detail["raw"] = e.raw
        raise HTTPException(status_code=e.status_code, detail=detail)
    except Exception:
        logger.exception("Resume translation failed")
        raise HTTPException(status_code=500, detail="Failed to translate resume")

"""
FastAPI application for the motive profile scoring engine.
Stateless: every request scores the submitted answers and returns the full result.
"""
import logging
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from fixtures.archetype_profiles import ARCHETYPE_PROFILES, ARCHETYPES, LEVEL_NAMES, PERSONA_PROFILES
from fixtures.question_bank import sample_catalog
from inference.pipeline import run_assessment
from questionnaires.answers import Answer
from questionnaires.catalog import CatalogError, QuestionCatalog, load_catalog

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=config.API_TITLE, version="1.0.0")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def _load_catalog() -> QuestionCatalog:
    if config.QUESTION_BANK_PATH:
        return load_catalog(config.QUESTION_BANK_PATH)
    logger.info("QUESTION_BANK_PATH not set; using the bundled sample bank")
    return sample_catalog()


def get_catalog() -> QuestionCatalog:
    try:
        return _load_catalog()
    except CatalogError as e:
        logger.error("Question bank failed to load: %s", e)
        raise HTTPException(status_code=500, detail=f"Question bank unavailable: {e}")


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class AnswerPayload(BaseModel):
    question_id: str
    option_id: str
    value: int = Field(..., ge=1, le=5)
    response_time_ms: Optional[float] = Field(None, ge=0)
    timestamp: Optional[datetime] = None

    def to_answer(self) -> Answer:
        return Answer(
            question_id=self.question_id,
            option_id=self.option_id,
            value=self.value,
            response_time_ms=self.response_time_ms,
            timestamp=self.timestamp,
        )


class AssessmentSubmission(BaseModel):
    """Answers collected by the client, in submission order"""
    answers: List[AnswerPayload] = Field(..., min_length=1)


class AssessmentResponse(BaseModel):
    result: Dict
    message: str


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "motive-profile-engine",
    }


# ============================================================================
# SCORING
# ============================================================================

@app.post("/assessment", response_model=AssessmentResponse)
async def score_assessment(
        submission: AssessmentSubmission,
        catalog: QuestionCatalog = Depends(get_catalog),
):
    """Score a submitted answer set and return the full profile"""
    answers = [a.to_answer() for a in submission.answers]
    result = run_assessment(answers, catalog)

    if result.reliability.is_valid:
        message = "Assessment completed successfully"
    else:
        message = "Assessment completed with low reliability"

    return AssessmentResponse(result=result.to_dict(), message=message)


# ============================================================================
# STATIC CONFIGURATION
# ============================================================================

@app.get("/archetypes")
async def list_archetypes():
    """Archetype weights, condition rules, level names and personas"""
    archetypes = []
    for key in ARCHETYPES:
        profile = ARCHETYPE_PROFILES[key]
        archetypes.append({
            "archetype": key,
            "name": profile["name"],
            "emoji": profile["emoji"],
            "weights": profile["weights"],
            "conditions": {
                rule: {"motive": motive, "threshold": threshold}
                for rule, (motive, threshold) in profile["conditions"].items()
            },
            "levels": LEVEL_NAMES[key],
            "personas": [
                {"persona": pkey, "name": name, "origin": origin, "motivation": vector}
                for pkey, name, origin, vector in PERSONA_PROFILES[key]
            ],
        })
    return {"archetypes": archetypes}


@app.get("/questions/stats")
async def question_stats(catalog: QuestionCatalog = Depends(get_catalog)):
    return catalog.stats()


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

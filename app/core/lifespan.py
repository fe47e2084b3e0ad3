from contextlib import asynccontextmanager
import logging

from app.analysis.feedback import get_feedback_thresholds
from app.analysis.scoring import get_scoring_weights
from app.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup, not on the first upload, if scoring.yaml is broken.
    weights = get_scoring_weights()
    thresholds = get_feedback_thresholds()
    logger.info(
        "resume_analyzer_startup scoring_config=%s required_sections=%s strong_skill_count=%s",
        settings.scoring_config_path,
        ",".join(weights.required_sections),
        thresholds.strong_skill_count,
    )
    yield
    logger.info("resume_analyzer_shutdown")

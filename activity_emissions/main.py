# activity_emissions/main.py
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import List
import logging
import math

from . import config, factors, schemas, utils

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_TITLE)
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])


def require_finite(kgco2: float) -> float:
    if not math.isfinite(kgco2):
        raise HTTPException(status_code=422, detail="Amount too large to estimate")
    return kgco2


@app.get("/health")
def health():
    return {"ok": True}

# -----------------
# Catalogue
# -----------------
@app.get("/categories", response_model=List[schemas.CategoryOut])
def list_categories():
    return [
        {"id": cid, "name": name, "units": factors.UNIT_OPTIONS[cid]}
        for cid, name in factors.CATEGORIES.items()
    ]

# -----------------
# Estimates
# -----------------
@app.post("/emissions", response_model=schemas.EmissionOut)
def estimate(payload: schemas.EmissionIn):
    label = payload.label or ""
    emissions = require_finite(
        utils.calculate_emissions(payload.category, payload.amount, payload.unit, label)
    )
    logger.debug("%s %s %s (%r) -> %.4f kgCO2e", payload.category, payload.amount, payload.unit, label, emissions)
    return {
        "category": payload.category,
        "amount": payload.amount,
        "unit": payload.unit,
        "label": label,
        "emissions_kgco2": emissions,
    }

@app.post("/emissions/batch", response_model=schemas.BatchOut)
def estimate_batch(payload: schemas.BatchIn):
    """
    Estimate several activities at once, e.g. a day's log. Totals are not
    rounded; clients format for display.
    """
    total, by_category, details = utils.summarize(payload.items)
    # a non-finite item always carries through to the total
    require_finite(total)
    logger.debug("batch of %d activities -> %.4f kgCO2e", len(details), total)
    return {"total_kgco2": total, "by_category": by_category, "items": details}

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ats_api.application.services.health_service import get_health_status
from ats_api.infrastructure.cache.redis_client import get_redis_client
from ats_api.infrastructure.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/ping")
def ping(db: Session = Depends(get_db)):
    return get_health_status(db=db, redis_client=get_redis_client())

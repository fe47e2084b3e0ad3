from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the resume analyzer is up.")
async def health_check():
    return {"status": "healthy"}

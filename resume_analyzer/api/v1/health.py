from fastapi import APIRouter

from resume_analyzer.schemas.analysis import HealthResponse

router = APIRouter()

@router.get("/health", response_model=HealthResponse, summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return HealthResponse(status="ok", message="Resume Analyzer API is running")

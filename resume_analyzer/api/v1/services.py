from fastapi import APIRouter, Depends

from resume_analyzer.ai.registry import ProviderRegistry, get_registry
from resume_analyzer.schemas.analysis import ServicesResponse, ServiceStatus

router = APIRouter()


@router.get("/ai-services", response_model=ServicesResponse)
def ai_services(registry: ProviderRegistry = Depends(get_registry)):
    return ServicesResponse(
        services=[
            ServiceStatus(id=info.id, name=info.display_name, available=info.available, status=info.status)
            for info in registry.list_providers()
        ]
    )

# scripts/weather/weather_handler.py
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from core.utils.error_handler import CityNotFound, http_status_for, log_exception
from core.utils.validator import parse_city_index
from process_manager import ProcessManager
from scripts.weather._processes.data_fetcher import run_weather_pipeline
from scripts.weather._processes.formatter import (
    render_error_page,
    render_index_page,
    render_validation_error
)

router = APIRouter()

ERROR_MESSAGES = {
    "weather": "The weather service is unavailable.",
    "snapshot": "The weather service returned incomplete data.",
    "advice": "The AI tip service is unavailable.",
    "news": "The news service is unavailable.",
    "render": "Not enough data to build the page.",
}


def get_process_manager(request: Request) -> ProcessManager:
    return request.app.state.process_manager


@router.get("/", response_class=HTMLResponse)
async def index(pm: ProcessManager = Depends(get_process_manager)):
    """Форма выбора города."""
    return HTMLResponse(render_index_page(pm.registry))


@router.get("/health")
async def health(pm: ProcessManager = Depends(get_process_manager)):
    return {"status": "ok", "cities": len(pm.registry)}


@router.post("/weather", response_class=HTMLResponse)
async def weather(
    city: Optional[str] = Form(None),
    pm: ProcessManager = Depends(get_process_manager)
):
    """Погода, совет и новость для выбранного города."""
    try:
        selected = parse_city_index(city, pm.registry)
    except CityNotFound:
        return HTMLResponse(render_validation_error(city))

    try:
        result = await run_weather_pipeline(
            selected, pm.weather_client, pm.advice_client, pm.news_client
        )
    except Exception as e:
        log_exception(e, "❌ Непредвиденная ошибка конвейера", {"city": selected.name})
        return HTMLResponse(render_error_page(500, "Internal server error."), status_code=500)

    if result.ok:
        return HTMLResponse(result.value)

    status = http_status_for(result.error)
    message = ERROR_MESSAGES.get(result.step, "Upstream failure.")
    return HTMLResponse(render_error_page(status, message), status_code=status)

"""FastAPI application entry point."""
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from workout_planner.routers import planner, strava
from workout_planner.routers.planner import get_navigator, get_workout_store
from workout_planner.services.calendar_renderer import build_week_view
from workout_planner.services.week_navigator import WeekNavigator
from workout_planner.services.workout_store import WorkoutStore


PACKAGE_DIR = Path(__file__).resolve().parent

app = FastAPI(title="Weekly Workout Planner")
app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")


@app.get("/", response_class=HTMLResponse, tags=["planner"])
async def planner_page(
    request: Request,
    navigator: Annotated[WeekNavigator, Depends(get_navigator)],
    workouts: Annotated[WorkoutStore, Depends(get_workout_store)],
    edit: bool = False,
) -> HTMLResponse:
    """Weekly planner page for the last viewed week."""
    state = navigator.load_current_week(edit_mode=edit)
    week = build_week_view(workouts, state)
    return templates.TemplateResponse(request, "planner.html", {"week": week})


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(planner.router)
app.include_router(strava.router)
app.add_exception_handler(StarletteHTTPException, strava.method_not_allowed_handler)

"""
Daybook Productivity API - FastAPI Server
HTTP surface for tasks, comments, goals, music lookup and the bot integration
"""

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
from uuid import UUID
import uvicorn
import logging

import config
from daybook import __version__
from daybook.date_utils import current_date as get_current_date
from daybook.exceptions import NotFoundError
from daybook.logging_monitoring import RequestLoggingMiddleware, setup_logging
from daybook.models import BotGoal, BotTask, Comment, Task
from daybook.music import resolve_music
from daybook.state import AppState, BotAppState, build_app_state, build_bot_state

# Setup logging
setup_logging(config.LOG_LEVEL, config.LOG_DIR)
logger = logging.getLogger(__name__)

MAX_GOAL_PROGRESS = 255
MAX_BOT_GOAL_PROGRESS = 2 ** 32 - 1


# REQUEST MODELS
# Scalars are strict: mismatched JSON types are rejected, never coerced
class TaskIn(BaseModel):
    id: Optional[StrictInt] = Field(default=None, description="Ignored; assigned by the server")
    title: StrictStr
    date: StrictStr = Field(..., description="Date string or Today/Tomorrow/This Week/This Month")
    completed: StrictBool
    priority: StrictStr


class CommentIn(BaseModel):
    id: Optional[StrictInt] = Field(default=None, description="Ignored; assigned by the server")
    title: StrictStr
    content: StrictStr


class CreateGoal(BaseModel):
    title: StrictStr
    description: StrictStr
    priority: StrictStr
    due_date: StrictStr


class UpdateProgress(BaseModel):
    progress: StrictInt = Field(..., ge=0, le=MAX_GOAL_PROGRESS)


class BotTaskIn(BaseModel):
    id: Optional[StrictInt] = Field(default=None, description="Ignored; assigned by the server")
    title: StrictStr
    completed: StrictBool
    is_pomodoro: StrictBool


class BotGoalIn(BaseModel):
    id: Optional[UUID] = Field(default=None, description="Ignored; a new UUID is assigned")
    title: StrictStr
    progress: StrictInt = Field(..., ge=0, le=MAX_BOT_GOAL_PROGRESS)


# STATE DEPENDENCIES
def get_app_state(request: Request) -> AppState:
    return request.app.state.daybook


def get_bot_state(request: Request) -> BotAppState:
    return request.app.state.bot


router = APIRouter()
bot_router = APIRouter(prefix="/bot")


# Main application routes
@router.get("/current-date")
async def current_date():
    """Today's local date as day/month/year"""
    return get_current_date().to_dict()


@router.get("/tasks")
def get_tasks(state: AppState = Depends(get_app_state)):
    return [task.to_dict() for task in state.tasks.list_tasks()]


@router.post("/tasks")
def add_task(task: TaskIn, state: AppState = Depends(get_app_state)):
    """Add a task; symbolic dates are resolved to concrete ones"""
    new_task = state.tasks.add_task(Task.from_dict(task.model_dump()))
    return new_task.to_dict()


@router.post("/tasks/complete/{task_id}")
def complete_task(task_id: int, state: AppState = Depends(get_app_state)):
    """
    Complete a task and return the full task list.

    A missing id is a 404, same as the bot route, rather than a silent no-op.
    """
    return [task.to_dict() for task in state.tasks.complete_task(task_id)]


@router.get("/comments")
def get_comments(state: AppState = Depends(get_app_state)):
    return [comment.to_dict() for comment in state.comments.list_comments()]


@router.post("/comments")
def add_comment(comment: CommentIn, state: AppState = Depends(get_app_state)):
    new_comment = state.comments.add_comment(Comment.from_dict(comment.model_dump()))
    return new_comment.to_dict()


@router.put("/comments/{comment_id}")
def update_comment(
    comment_id: int,
    comment: CommentIn,
    state: AppState = Depends(get_app_state)
):
    updated = state.comments.update_comment(comment_id, Comment.from_dict(comment.model_dump()))
    return updated.to_dict()


@router.get("/goals")
def get_goals(state: AppState = Depends(get_app_state)):
    return [goal.to_dict() for goal in state.goals.list_goals()]


@router.post("/goals")
def create_goal(goal: CreateGoal, state: AppState = Depends(get_app_state)):
    """Create a goal with zero progress and no sub-goals"""
    new_goal = state.goals.create_goal(
        title=goal.title,
        description=goal.description,
        priority=goal.priority,
        due_date=goal.due_date,
    )
    return new_goal.to_dict()


@router.put("/goals/{goal_id}/progress")
def update_progress(
    goal_id: UUID,
    progress: UpdateProgress,
    state: AppState = Depends(get_app_state)
):
    return state.goals.update_progress(goal_id, progress.progress).to_dict()


@router.get("/api/music/{category}")
async def get_music(category: str):
    """Track URL for a music category (unknown categories get the default)"""
    return resolve_music(category)


# Bot routes
@bot_router.get("/tasks")
def get_bot_tasks(bot: BotAppState = Depends(get_bot_state)):
    return [task.to_dict() for task in bot.tasks.list_tasks()]


@bot_router.post("/tasks")
def add_bot_task(task: BotTaskIn, bot: BotAppState = Depends(get_bot_state)):
    return bot.tasks.add_task(BotTask.from_dict(task.model_dump())).to_dict()


@bot_router.put("/tasks/{task_id}")
def update_bot_task(
    task_id: int,
    task: BotTaskIn,
    bot: BotAppState = Depends(get_bot_state)
):
    return bot.tasks.update_task(task_id, BotTask.from_dict(task.model_dump())).to_dict()


@bot_router.post("/tasks/complete/{task_id}")
def complete_bot_task(task_id: int, bot: BotAppState = Depends(get_bot_state)):
    return bot.tasks.complete_task(task_id).to_dict()


@bot_router.delete("/tasks/{task_id}")
def delete_bot_task(task_id: int, bot: BotAppState = Depends(get_bot_state)):
    bot.tasks.delete_task(task_id)
    return Response(status_code=200)


@bot_router.get("/goals")
def get_bot_goals(bot: BotAppState = Depends(get_bot_state)):
    return [goal.to_dict() for goal in bot.goals.list_goals()]


@bot_router.post("/goals")
def add_bot_goal(goal: BotGoalIn, bot: BotAppState = Depends(get_bot_state)):
    """Add a bot goal; any id in the body is replaced by a new UUID"""
    return bot.goals.add_goal(BotGoal.from_dict(goal.model_dump())).to_dict()


# Service routes
@router.get("/health")
def health_check(
    state: AppState = Depends(get_app_state),
    bot: BotAppState = Depends(get_bot_state)
):
    """Health check with per-store record counts."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": config.ENVIRONMENT,
        "stores": {**state.counts(), **bot.counts()},
    }


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": "Daybook API",
        "version": __version__,
        "status": "operational",
        "docs": "/docs"
    }


# ERROR HANDLERS
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=404)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning(f"Rejected {request.method} {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"detail": f"JSON Error: {details}"})


async def bad_request_handler(request: Request, exc: StarletteHTTPException):
    """Give body-parsing 400s the same JSON Error shape as validation failures."""
    if exc.status_code != 400:
        return await http_exception_handler(request, exc)
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=400, content={"detail": f"JSON Error: {exc.detail}"})


def create_app(
    app_state: Optional[AppState] = None,
    bot_state: Optional[BotAppState] = None
) -> FastAPI:
    """
    Build the FastAPI application around the given stores.

    Args:
        app_state: Main-app stores (built from config when omitted)
        bot_state: Bot stores (fresh when omitted)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Daybook API",
        description="Tasks, comments, goals and assistant integration",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.daybook = app_state or build_app_state(seed_comments=config.SEED_COMMENTS)
    app.state.bot = bot_state or build_bot_state()

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, bad_request_handler)

    # Request logging, then CORS outermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(bot_router)
    return app


app = create_app()


def main():
    """Run the API server with uvicorn."""
    if config.API_WORKERS > 1:
        logger.warning(
            f"API_WORKERS={config.API_WORKERS}: each worker keeps its own in-memory stores"
        )
    uvicorn.run(
        "api_server:app",
        host=config.API_HOST,
        port=config.API_PORT,
        workers=config.API_WORKERS,
        reload=False,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()

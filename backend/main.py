from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from models.alpha_beta_agent import AlphaBetaAgent, SearchStats
from models.errors import ConfigurationError, SuccessorContractError
from models.game_state import GameState
import logging
import time

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],  # Frontend URL
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class AgentSettings(BaseModel):
    max_depth: Optional[int] = Field(None, ge=1, le=9, description="Maximum search depth for alpha-beta (1-9)")
    evaluation: Optional[Literal["static", "dynamic"]] = Field(None, description="Evaluation mode ('static' or 'dynamic')")
    max_time_seconds: Optional[int] = Field(None, ge=1, le=60, description="Time budget per move in seconds (1-60)")

class MoveRequest(BaseModel):
    board: List[str]
    turn: Literal["BLACK", "WHITE"]
    turn_number: int = Field(0, ge=0)
    settings: Optional[AgentSettings] = None  # Optional agent settings

# Default agent settings
default_settings = {
    "max_depth": 4,
    "evaluation": "dynamic",
    "max_time_seconds": 10
}

@app.get("/agent-settings")
async def get_agent_settings():
    """Get default settings for the alpha-beta agent"""
    return default_settings

@app.post("/get-best-move")
def get_best_move(request: MoveRequest):
    start_time = time.time()

    # Log board state in a compact format
    logger.info("BOARD STATE:")
    for row in request.board:
        logger.info(" ".join(row))
    logger.info(f"Turn: {request.turn} | Turn number: {request.turn_number}")

    try:
        state = GameState.from_rows(request.board, request.turn, request.turn_number)
    except ValueError as e:
        logger.error(f"Invalid board: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    if state.is_terminal():
        raise HTTPException(status_code=400, detail="Game is already over")

    max_depth = default_settings["max_depth"]
    evaluation = default_settings["evaluation"]
    max_time_seconds = default_settings["max_time_seconds"]
    if request.settings:
        if request.settings.max_depth is not None:
            max_depth = request.settings.max_depth
        if request.settings.evaluation is not None:
            evaluation = request.settings.evaluation
        if request.settings.max_time_seconds is not None:
            max_time_seconds = request.settings.max_time_seconds

    try:
        logger.info(f"Starting alpha-beta search: max_depth={max_depth}, evaluation={evaluation}, max_time_seconds={max_time_seconds}")
        # Past the budget every unexpanded node is scored as a leaf
        agent = AlphaBetaAgent(
            max_depth=max_depth,
            evaluation_mode=evaluation,
            should_stop=lambda s: s.elapsed() > max_time_seconds
        )
        stats = SearchStats()
        move = agent.get_move(state, stats)
        state.apply_move(move)
    except (ConfigurationError, SuccessorContractError) as e:
        logger.exception("Detailed agent error traceback:")
        raise HTTPException(status_code=500, detail=f"Agent error: {str(e)}")

    elapsed = time.time() - start_time
    logger.info(f"Selected: {move} value={stats.value} nodes={stats.nodes} [{elapsed:.2f}s]")

    return {
        "move": move,
        "board": state.to_rows(),
        "turn": state.turn,
        "turn_number": state.turn_number,
        "game_ended": state.is_terminal(),
        "evaluation": stats.value,
    }

@app.get("/")
async def root():
    logger.info("Root endpoint accessed")
    return {"message": "Welcome to the Othello AI Backend"}

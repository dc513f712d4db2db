import logging
import os
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncSession

from . import assembler, crud, database, schemas
from .config import Settings, settings as default_settings
from .errors import NotFoundError, QuizError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quiz"])


@router.post(
    "/quiz",
    response_model=schemas.QuizCreated,
    summary="Criar quiz",
    description="Cria um quiz com perguntas e alternativas.",
)
async def create_quiz(quiz: schemas.QuizCreate, db: AsyncSession = Depends(database.get_db)):
    quiz_id = await assembler.create_quiz(db, quiz)
    return {"message": "Quiz criado com sucesso!", "quizId": quiz_id}


@router.get(
    "/quiz",
    response_model=list[schemas.QuizOut],
    summary="Listar quizzes",
    description="Todos os quizzes, mais recentes primeiro.",
)
async def list_quizzes(db: AsyncSession = Depends(database.get_db)):
    return await crud.quizzes.list_quizzes(db)


@router.get(
    "/quiz/{quiz_id}",
    response_model=schemas.QuizOutFull,
    summary="Obter quiz completo",
    description="Quiz com suas perguntas e alternativas.",
)
async def get_quiz(quiz_id: str, db: AsyncSession = Depends(database.get_db)):
    # any id that is not an integer matches no quiz
    try:
        quiz_id = int(quiz_id)
    except ValueError:
        raise NotFoundError(assembler.NOT_FOUND)
    return await assembler.get_quiz(db, quiz_id)


async def quiz_error_handler(request: Request, exc: QuizError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        err = errors[0]
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        message = f"{field}: {err.get('msg')}" if field else err.get("msg")
    else:
        message = "Requisição inválida"
    return JSONResponse({"error": message}, status_code=400)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Quiz API",
        description="Criação e consulta de quizzes com perguntas e alternativas.",
        version="1.0.0",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QuizError, quiz_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    @app.on_event("startup")
    async def startup():
        logging.basicConfig(level=settings.LOG_LEVEL)
        engine = database.create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        await database.init_db(engine)
        app.state.engine = engine
        app.state.async_session = database.create_sessionmaker(engine)
        logger.info("database ready at %s", settings.DATABASE_URL)

    @app.on_event("shutdown")
    async def shutdown():
        await app.state.engine.dispose()

    app.include_router(router)

    # mounted last so the API routes take precedence over files in STATIC_DIR
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


app = create_app()

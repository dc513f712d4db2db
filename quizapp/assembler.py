"""Conversion between the nested quiz document and the flat store rows.

Writes walk the document top-down (quiz, then each pergunta, then each of its
alternativas) inside a single transaction. Reads fold the joined rows, one per
alternativa, back into the nested document.
"""
import logging
from typing import Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from . import crud, schemas
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Quiz deve ter título e pelo menos uma pergunta"
NOT_FOUND = "Quiz não encontrado"


def validate_quiz(payload: schemas.QuizCreate):
    if not payload.titulo or not payload.perguntas:
        raise ValidationError(MISSING_FIELDS)


async def create_quiz(db: AsyncSession, payload: schemas.QuizCreate) -> int:
    """Persist the quiz with all its perguntas and alternativas, all or nothing."""
    validate_quiz(payload)

    async with db.begin():
        quiz_id = await crud.quizzes.insert_quiz(db, payload.titulo, payload.descricao)
        for pergunta in payload.perguntas:
            pergunta_id = await crud.quizzes.insert_pergunta(db, quiz_id, pergunta.enunciado)
            for alt in pergunta.alternativas:
                await crud.quizzes.insert_alternativa(db, pergunta_id, alt.texto, alt.correta)

    logger.info("quiz %s created with %d perguntas", quiz_id, len(payload.perguntas))
    return quiz_id


def assemble_quiz(rows: Iterable[Mapping]) -> dict:
    rows = list(rows)
    if not rows:
        raise NotFoundError(NOT_FOUND)

    first = rows[0]
    quiz = {
        "id": first["quiz_id"],
        "titulo": first["titulo"],
        "descricao": first["descricao"],
        "perguntas": [],
    }

    perguntas = {}
    for r in rows:
        pergunta = perguntas.get(r["pergunta_id"])
        if pergunta is None:
            pergunta = {"id": r["pergunta_id"], "enunciado": r["enunciado"], "alternativas": []}
            perguntas[r["pergunta_id"]] = pergunta
            quiz["perguntas"].append(pergunta)

        pergunta["alternativas"].append({
            "id": r["alternativa_id"],
            "texto": r["texto"],
            "correta": bool(r["correta"]),
        })

    return quiz


async def get_quiz(db: AsyncSession, quiz_id: int) -> dict:
    rows = await crud.quizzes.get_quiz_rows(db, quiz_id)
    if not rows:
        logger.debug("quiz %s not found", quiz_id)
    return assemble_quiz(rows)

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .. import models
from ..errors import PersistenceError

logger = logging.getLogger(__name__)


async def _flush(db: AsyncSession, obj):
    db.add(obj)
    try:
        await db.flush()
    except SQLAlchemyError as e:
        logger.error("insert into %s failed: %s", obj.__tablename__, e)
        raise PersistenceError(str(e)) from e
    return obj.id


async def insert_quiz(db: AsyncSession, titulo: str, descricao: Optional[str] = None) -> int:
    return await _flush(db, models.Quiz(titulo=titulo, descricao=descricao))


async def insert_pergunta(db: AsyncSession, quiz_id: int, enunciado: str) -> int:
    return await _flush(db, models.Pergunta(quiz_id=quiz_id, enunciado=enunciado))


async def insert_alternativa(db: AsyncSession, pergunta_id: int, texto: str, correta=False) -> int:
    return await _flush(
        db, models.Alternativa(pergunta_id=pergunta_id, texto=texto, correta=bool(correta))
    )


async def list_quizzes(db: AsyncSession):
    """All quizzes, newest first."""
    try:
        result = await db.execute(select(models.Quiz).order_by(models.Quiz.id.desc()))
    except SQLAlchemyError as e:
        logger.error("listing quizzes failed: %s", e)
        raise PersistenceError(str(e)) from e
    return result.scalars().all()


async def get_quiz_rows(db: AsyncSession, quiz_id: int):
    """One row per option of the quiz, joined with its question and quiz.

    Inner joins: questions without options, and quizzes without questions,
    produce no rows.
    """
    stmt = (
        select(
            models.Quiz.id.label("quiz_id"),
            models.Quiz.titulo,
            models.Quiz.descricao,
            models.Pergunta.id.label("pergunta_id"),
            models.Pergunta.enunciado,
            models.Alternativa.id.label("alternativa_id"),
            models.Alternativa.texto,
            models.Alternativa.correta,
        )
        .join(models.Pergunta, models.Pergunta.quiz_id == models.Quiz.id)
        .join(models.Alternativa, models.Alternativa.pergunta_id == models.Pergunta.id)
        .where(models.Quiz.id == quiz_id)
        .order_by(models.Pergunta.id, models.Alternativa.id)
    )
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        logger.error("loading quiz %s failed: %s", quiz_id, e)
        raise PersistenceError(str(e)) from e
    return result.mappings().all()


async def delete_quiz(db: AsyncSession, quiz_id: int) -> bool:
    """Administrative delete; the store cascades to perguntas and alternativas."""
    try:
        result = await db.execute(delete(models.Quiz).where(models.Quiz.id == quiz_id))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise PersistenceError(str(e)) from e
    return result.rowcount > 0

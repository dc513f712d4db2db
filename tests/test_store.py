import pytest
from sqlalchemy import func, select, text

from quizapp import database, models
from quizapp.crud import quizzes
from quizapp.errors import PersistenceError


async def count(db, model):
    return await db.scalar(select(func.count()).select_from(model))


async def test_init_db_is_idempotent(engine, db):
    await database.init_db(engine)
    await database.init_db(engine)

    result = await db.execute(text("SELECT name FROM sqlite_master WHERE type = 'table'"))
    names = [name for name in result.scalars() if not name.startswith("sqlite_")]
    assert sorted(names) == ["alternativa", "pergunta", "quiz"]


async def test_insert_returns_generated_ids(db):
    first = await quizzes.insert_quiz(db, "Primeiro", None)
    second = await quizzes.insert_quiz(db, "Segundo", "desc")
    pergunta_id = await quizzes.insert_pergunta(db, second, "Enunciado")
    alternativa_id = await quizzes.insert_alternativa(db, pergunta_id, "Texto", True)
    await db.commit()

    assert second > first
    assert pergunta_id >= 1
    assert alternativa_id >= 1


async def test_duplicate_titles_are_allowed(db):
    await quizzes.insert_quiz(db, "Igual")
    await quizzes.insert_quiz(db, "Igual")
    await db.commit()

    assert await count(db, models.Quiz) == 2


async def test_insert_pergunta_requires_existing_quiz(db):
    with pytest.raises(PersistenceError):
        await quizzes.insert_pergunta(db, 999, "Órfã")
    await db.rollback()

    assert await count(db, models.Pergunta) == 0


async def test_insert_quiz_without_titulo_fails(db):
    with pytest.raises(PersistenceError):
        await quizzes.insert_quiz(db, None)
    await db.rollback()


async def test_correta_is_stored_as_bool(db):
    quiz_id = await quizzes.insert_quiz(db, "Quiz")
    pergunta_id = await quizzes.insert_pergunta(db, quiz_id, "P")
    await quizzes.insert_alternativa(db, pergunta_id, "sim", "yes")
    await quizzes.insert_alternativa(db, pergunta_id, "não", 0)
    await db.commit()

    rows = await quizzes.get_quiz_rows(db, quiz_id)
    assert [r["correta"] for r in rows] == [True, False]


async def test_list_quizzes_newest_first(db):
    ids = [await quizzes.insert_quiz(db, f"Quiz {i}") for i in range(3)]
    await db.commit()

    listed = await quizzes.list_quizzes(db)
    assert [q.id for q in listed] == sorted(ids, reverse=True)


async def test_get_quiz_rows_one_row_per_alternativa(db):
    quiz_id = await quizzes.insert_quiz(db, "Quiz", "D")
    p1 = await quizzes.insert_pergunta(db, quiz_id, "P1")
    await quizzes.insert_alternativa(db, p1, "A", True)
    await quizzes.insert_alternativa(db, p1, "B", False)
    p2 = await quizzes.insert_pergunta(db, quiz_id, "P2")
    await quizzes.insert_alternativa(db, p2, "C", False)
    await quizzes.insert_pergunta(db, quiz_id, "sem alternativas")
    await db.commit()

    rows = await quizzes.get_quiz_rows(db, quiz_id)

    assert [(r["pergunta_id"], r["texto"]) for r in rows] == [(p1, "A"), (p1, "B"), (p2, "C")]
    assert {r["quiz_id"] for r in rows} == {quiz_id}
    assert rows[0]["titulo"] == "Quiz"
    assert rows[0]["descricao"] == "D"


async def test_get_quiz_rows_unknown_id_is_empty(db):
    assert list(await quizzes.get_quiz_rows(db, 42)) == []


async def test_delete_quiz_cascades(db):
    quiz_id = await quizzes.insert_quiz(db, "Quiz")
    pergunta_id = await quizzes.insert_pergunta(db, quiz_id, "P")
    await quizzes.insert_alternativa(db, pergunta_id, "A", True)
    other_id = await quizzes.insert_quiz(db, "Outro")
    await quizzes.insert_pergunta(db, other_id, "P")
    await db.commit()

    assert await quizzes.delete_quiz(db, quiz_id) is True

    assert await count(db, models.Quiz) == 1
    assert await count(db, models.Pergunta) == 1
    assert await count(db, models.Alternativa) == 0
    assert await quizzes.delete_quiz(db, quiz_id) is False

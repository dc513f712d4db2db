from pydantic import BaseModel, field_validator
from typing import Any, Optional


class AlternativaCreate(BaseModel):
    texto: str
    correta: bool = False

    @field_validator('correta', mode='before')
    @classmethod
    def coerce_truthy(cls, v: Any) -> bool:
        # JSON arrays and objects are truthy even when empty
        if isinstance(v, (list, dict)):
            return True
        return bool(v)


class PerguntaCreate(BaseModel):
    enunciado: str
    alternativas: list[AlternativaCreate] = []


class QuizCreate(BaseModel):
    # presence of titulo and perguntas is checked by the assembler, not here,
    # so that a missing field answers 400 with the quiz error message
    titulo: Optional[str] = None
    descricao: Optional[str] = None
    perguntas: Optional[list[PerguntaCreate]] = None


class QuizCreated(BaseModel):
    message: str
    quizId: int


class QuizOut(BaseModel):
    id: int
    titulo: str
    descricao: Optional[str]

    class Config:
        from_attributes = True


class AlternativaOut(BaseModel):
    id: int
    texto: str
    correta: bool


class PerguntaOut(BaseModel):
    id: int
    enunciado: str
    alternativas: list[AlternativaOut]


class QuizOutFull(BaseModel):
    id: int
    titulo: str
    descricao: Optional[str]
    perguntas: list[PerguntaOut]

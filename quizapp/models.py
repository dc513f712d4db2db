from sqlalchemy import Column, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from .database import Base


class Quiz(Base):
    __tablename__ = "quiz"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True)
    titulo = Column(Text, nullable=False)
    descricao = Column(Text, nullable=True)
    perguntas = relationship(
        "Pergunta", back_populates="quiz", cascade="all, delete-orphan", passive_deletes=True
    )


class Pergunta(Base):
    __tablename__ = "pergunta"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True)
    quiz_id = Column(Integer, ForeignKey("quiz.id", ondelete="CASCADE"), nullable=False)
    enunciado = Column(Text, nullable=False)
    quiz = relationship("Quiz", back_populates="perguntas")
    alternativas = relationship(
        "Alternativa", back_populates="pergunta", cascade="all, delete-orphan", passive_deletes=True
    )


class Alternativa(Base):
    __tablename__ = "alternativa"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True)
    pergunta_id = Column(Integer, ForeignKey("pergunta.id", ondelete="CASCADE"), nullable=False)
    texto = Column(Text, nullable=False)
    correta = Column(Boolean, nullable=False, default=False, server_default="0")
    pergunta = relationship("Pergunta", back_populates="alternativas")

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions are used from FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, future=True, echo=False)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

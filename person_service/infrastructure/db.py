from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from ..config import settings

# Параметры пула и кодировки зависят от драйвера
engine_kwargs = {"pool_pre_ping": True, "pool_recycle": 3600, "echo": False}
if settings.DATABASE_URL.startswith("postgresql"):
    engine_kwargs.update(pool_size=10, max_overflow=20, connect_args={"client_encoding": "utf8"})
elif settings.DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, **engine_kwargs)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

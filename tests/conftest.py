import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from credstore.core.deps import get_settings
from credstore.core.settings import Settings
from credstore.database import Base, build_engine, get_db
from credstore.domain.repositories import InMemoryUserRecordStore, SqlAlchemyUserRecordStore
from credstore.main import create_app
from credstore.services.credential_store import CredentialStore


@pytest.fixture
def settings():
    # Lowest bcrypt cost keeps the suite fast
    return Settings(ENV="test", BCRYPT_ROUNDS=4, DATABASE_URL="sqlite://")


@pytest.fixture
def memory_store():
    return InMemoryUserRecordStore()


@pytest.fixture
def credential_store(memory_store, settings):
    return CredentialStore(user_repo=memory_store, settings=settings)


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'users.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def sql_store(db_session):
    return SqlAlchemyUserRecordStore(db_session)


@pytest.fixture
def client(session_factory, settings):
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    # Skip the lifespan hook so the real database is never touched
    return TestClient(app)

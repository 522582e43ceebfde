import os

# Keep the app from touching ./heybuddy.db when main is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from heybuddy.database import Base, get_db
from main import app


SAMPLE_SYLLABUS = """\
CSE 310 Syllabus
Course: Intro to Algorithms
Instructor: Dr. Ada Lovelace
Office hours: Tuesday 2-4pm

Course Outline:
Week 1: Asymptotic analysis
Week 2: Sorting

Week 3: readings on recursion
Grading Policy
Homework 40%, Exams 60%

Homework 1 due 02/10/2025
Final Project due December 1
Midterm Exam due 03/15/2025
Quiz 2 on Feb 30 covers graphs
"""


@pytest.fixture
def sample_syllabus():
    return SAMPLE_SYLLABUS


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

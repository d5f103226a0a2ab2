# =============================================================================
# CONFTEST - Fixtures compartilhadas para testes HTTP
# =============================================================================
# Usuários registrados e quizzes criados pela própria API
# =============================================================================

import pytest


def _register(client, email: str, name: str, role: str) -> dict[str, str]:
    response = client.post(
        "/quiz/auth/register",
        json={"email": email, "password": "secret", "name": name, "role": role},
    )
    assert response.status_code == 201, response.text
    return {"X-User-Id": response.json()["id"]}


# =============================================================================
# FIXTURES DE USUÁRIOS
# =============================================================================


@pytest.fixture
def teacher_headers(client) -> dict[str, str]:
    """Headers de um professor autenticado."""
    return _register(client, "teacher@example.com", "Teacher", "teacher")


@pytest.fixture
def student_headers(client) -> dict[str, str]:
    """Headers de um aluno autenticado."""
    return _register(client, "student@example.com", "Student", "student")


@pytest.fixture
def other_teacher_headers(client) -> dict[str, str]:
    return _register(client, "other@example.com", "Other Teacher", "teacher")


# =============================================================================
# FIXTURES DE QUIZ
# =============================================================================


@pytest.fixture
def api_quiz_payload(sample_questions) -> dict:
    """Payload de criação via HTTP (autor definido pelo servidor)."""
    return {
        "title": "Data Structures",
        "description": "Stacks and queues",
        "questions": sample_questions,
        "is_published": True,
    }


@pytest.fixture
def published_quiz(client, teacher_headers, api_quiz_payload) -> dict:
    """Quiz publicado criado pelo professor."""
    response = client.post("/quiz/quizzes", json=api_quiz_payload, headers=teacher_headers)
    assert response.status_code == 201, response.text
    return response.json()

from fastapi.testclient import TestClient

from registrar.api.client import RegistrarClient


def make_client(app):
    session = TestClient(app.create_rest_api().app)
    return RegistrarClient("http://testserver", session=session)


def test_check_server(app, capsys):
    client = make_client(app)

    assert client.check_server()
    assert "Server is running" in capsys.readouterr().out


def test_seed_sample_data_over_http(app):
    client = make_client(app)

    counts = client.seed_sample_data()

    assert counts == {"students": 5, "courses": 4, "enrollments": 8}
    assert app.registry.find_course("CSE101").enrolled_student_ids == ["S001", "S002", "S005"]


def test_seeding_twice_reports_failures(app, capsys):
    client = make_client(app)
    client.seed_sample_data()

    counts = client.seed_sample_data()

    assert counts == {"students": 0, "courses": 0, "enrollments": 0}
    assert "Failed to create student" in capsys.readouterr().out


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("REGISTRAR_BASE_URL", "http://example.test:9000/")

    assert RegistrarClient(session=object()).base_url == "http://example.test:9000"

"""
채용공고 API 테스트

실행 방법:
    pytest tests/test_jobs.py -v
"""
from unittest.mock import AsyncMock, patch

import pytest


@pytest.fixture
def mock_jobs_data():
    return [
        {"id": 1, "title": "J1", "salary": 1, "equity": None, "companyHandle": "c1", "companyName": "C1"},
        {"id": 2, "title": "J2", "salary": 2, "equity": None, "companyHandle": "c1", "companyName": "C1"},
    ]


class TestGetJobs:
    """GET /jobs 테스트"""

    def test_get_jobs(self, client, conn, mock_jobs_data):
        with patch("repositories.jobs.find_all", new_callable=AsyncMock,
                   return_value=mock_jobs_data) as mock_find:
            response = client.get("/jobs")

        assert response.status_code == 200
        assert [j["companyName"] for j in response.json()["jobs"]] == ["C1", "C1"]
        mock_find.assert_awaited_once_with(conn)

    def test_get_jobs_filters(self, client, conn):
        with patch("repositories.jobs.find_all", new_callable=AsyncMock, return_value=[]) as mock_find:
            response = client.get("/jobs?minSalary=100&hasEquity=true&title=eng")

        assert response.status_code == 200
        mock_find.assert_awaited_once_with(conn, min_salary=100, has_equity=True, title="eng")

    def test_get_jobs_has_equity_false_adds_no_clause(self, client):
        with patch("repositories.jobs.fetch_all", new_callable=AsyncMock, return_value=[]) as mock_fetch:
            response = client.get("/jobs?hasEquity=false")

        assert response.status_code == 200
        sql, values = mock_fetch.await_args.args[1:]
        assert "WHERE" not in sql
        assert values == []

    def test_get_jobs_has_equity_not_boolean(self, client):
        response = client.get("/jobs?hasEquity=maybe")
        assert response.status_code == 422

    def test_get_jobs_unknown_filter(self, client):
        response = client.get("/jobs?maxSalary=10")
        assert response.status_code == 422


class TestGetJob:
    """GET /jobs/{id} 테스트"""

    def test_get_job_with_company(self, client):
        job_row = {"id": 1, "title": "J1", "salary": 1, "equity": None, "companyHandle": "c1"}
        company_row = {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": None}
        with patch("repositories.jobs.fetch_one", new_callable=AsyncMock, side_effect=[job_row, company_row]):
            response = client.get("/jobs/1")

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["company"]["handle"] == "c1"
        assert "companyHandle" not in job

    def test_get_job_not_found(self, client):
        with patch("repositories.jobs.fetch_one", new_callable=AsyncMock, return_value=None):
            response = client.get("/jobs/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "No job: 999"


class TestCreateJob:
    """POST /jobs 테스트"""

    def test_create_job_admin(self, client, admin_headers):
        created = {"id": 3, "title": "J3", "salary": 300, "equity": None, "companyHandle": "c1"}
        with patch("repositories.jobs.create", new_callable=AsyncMock, return_value=created):
            response = client.post("/jobs", json={"title": "J3", "salary": 300, "companyHandle": "c1"},
                                   headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["job"]["id"] == 3

    def test_create_job_non_admin(self, client, user_headers):
        response = client.post("/jobs", json={"title": "J3", "companyHandle": "c1"}, headers=user_headers)
        assert response.status_code == 403


class TestUpdateJob:
    """PATCH /jobs/{id} 테스트"""

    def test_update_job(self, client, admin_headers):
        updated = {"id": 1, "title": "New", "salary": 1, "equity": None, "companyHandle": "c1"}
        with patch("repositories.jobs.fetch_one", new_callable=AsyncMock, return_value=updated) as mock_fetch:
            response = client.patch("/jobs/1", json={"title": "New"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["job"]["title"] == "New"
        sql, values = mock_fetch.await_args.args[1:]
        assert 'SET "title"=$1' in sql
        assert values == ["New", 1]

    def test_update_job_empty_body(self, client, admin_headers):
        response = client.patch("/jobs/1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"

    def test_update_job_null_title(self, client, admin_headers):
        with patch("repositories.jobs.fetch_one", new_callable=AsyncMock) as mock_fetch:
            response = client.patch("/jobs/1", json={"title": None}, headers=admin_headers)

        assert response.status_code == 422
        mock_fetch.assert_not_awaited()

    def test_update_job_cannot_change_company(self, client, admin_headers):
        response = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_job_cannot_change_id(self, client, admin_headers):
        response = client.patch("/jobs/1", json={"id": 2}, headers=admin_headers)
        assert response.status_code == 422


class TestDeleteJob:
    """DELETE /jobs/{id} 테스트"""

    def test_delete_job(self, client, admin_headers):
        with patch("repositories.jobs.remove", new_callable=AsyncMock):
            response = client.delete("/jobs/1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": 1}

    def test_delete_job_anonymous(self, client):
        response = client.delete("/jobs/1")
        assert response.status_code == 401
